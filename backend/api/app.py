from typing import Any, Dict
from fastapi import FastAPI, Path
import logging
import os
import uvicorn
from backend.api.services.cep_service import CepService
from backend.api.services.document_service import DocumentValidationService
from backend.utils.documents import DocumentType

logger = logging.getLogger(__name__)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "3000"))

app = FastAPI(title="Document Validation API", version="1.0.0")

document_service = DocumentValidationService()
cep_service = CepService()


@app.get("/")
async def root() -> dict:
    """
    Endpoint de status da API.
    Retorno:
        dict: status da API
    """
    logger.info("Endpoint / chamado, status=ok")
    return {"status": "ok"}


######### Documentos (prefixo /api/v1)
@app.post("/api/v1/documents/{document_type}")
async def validate_document(document_type: DocumentType, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida CPF, CNPJ, IE ou RG pelos dígitos verificadores.
    Parâmetros:
        document_type (DocumentType): cpf, cnpj, ie ou rg
        payload (dict): {"value": "<documento>"}
    Retorno:
        dict: documento normalizado
    """
    logger.info(f"Validação solicitada: tipo={document_type.value}")
    return document_service.validate(document_type, payload)


######### CEP
@app.get("/api/v1/cep/{cep}")
async def get_cep(cep: str = Path(..., description="CEP com ou sem formatação")) -> Dict[str, Any]:
    """
    Consulta um CEP no serviço externo.
    Parâmetros:
        cep (str): CEP
    Retorno:
        dict: CEP normalizado e endereço
    """
    logger.info(f"Consulta de CEP: cep={cep}")
    return await cep_service.lookup(cep)


if __name__ == "__main__":
    """
    Inicializa o servidor Uvicorn para rodar a API.
    """
    logger.info(f"Starting Uvicorn server on {API_HOST}:{API_PORT}")
    uvicorn.run(app, host=API_HOST, port=API_PORT)
