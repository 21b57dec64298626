"""
Serviço de consulta de CEP: traduz o resultado do serviço externo para respostas HTTP.
"""
import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import HTTPException

from backend.utils.cep_utils import CepLookupError, lookup_postal_code, validate_cep


class CepService:
    def __init__(self, client: Optional[httpx.AsyncClient] = None, logger=None):
        """
        Parâmetros:
            client (httpx.AsyncClient, opcional): cliente HTTP; sem ele, um por consulta
            logger (logging.Logger, opcional): Logger para logs
        """
        self.client = client
        if logger is None:
            logger = logging.getLogger("cep_service")
            logger.setLevel(logging.INFO)
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
            if not logger.hasHandlers():
                logger.addHandler(handler)
        self.logger = logger

    async def lookup(self, cep: str) -> Dict[str, Any]:
        """
        Consulta um CEP.
        Parâmetros:
            cep (str): CEP em qualquer formato
        Retorno:
            dict: CEP normalizado e endereço
        """
        checked = validate_cep(cep)
        if not checked.is_valid:
            self.logger.warning(f"CEP com formato inválido: cep={cep}")
            raise HTTPException(status_code=422, detail={"reason": checked.reason.value})

        try:
            result = await lookup_postal_code(checked.value, client=self.client)
        except CepLookupError:
            self.logger.exception(f"Falha na consulta externa do CEP: cep={checked.value}")
            raise HTTPException(status_code=502, detail="Serviço de CEP indisponível, tente novamente mais tarde")

        if not result.found:
            self.logger.warning(f"CEP não encontrado: cep={result.cep}")
            raise HTTPException(status_code=404, detail="CEP não encontrado")
        return {"cep": result.cep, "address": result.address}
