"""
Serviço de validação de documentos: encapsula a chamada aos validadores,
o mapeamento de rejeições para erros HTTP e os logs.
"""
import logging
from typing import Any, Dict

from fastapi import HTTPException

from backend.utils.documents import DocumentType, validate_document


class DocumentValidationService:
    def __init__(self, logger=None):
        """
        Inicializa o serviço de validação.
        Parâmetros:
            logger (logging.Logger, opcional): Logger para logs
        """
        if logger is None:
            logger = logging.getLogger("document_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    def validate(self, document_type: DocumentType, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Valida o documento informado no payload.
        Parâmetros:
            document_type (DocumentType): tipo do documento
            payload (dict): {"value": "<documento>"}
        Retorno:
            dict: documento normalizado
        """
        value = payload.get("value")
        if value is None or not isinstance(value, str):
            self.logger.warning(f"Payload sem value válido: {payload}")
            raise HTTPException(status_code=400, detail="Campo obrigatório: value (string)")

        result = validate_document(document_type, value)
        if not result.is_valid:
            self.logger.warning(f"Documento rejeitado: tipo={document_type.value}, motivo={result.reason.value}")
            raise HTTPException(
                status_code=422,
                detail={"document_type": document_type.value, "reason": result.reason.value},
            )

        self.logger.info(f"Documento aceito: tipo={document_type.value}")
        return {"document_type": document_type.value, "value": result.value, "valid": True}
