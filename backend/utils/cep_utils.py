"""
Consulta de CEP em serviço externo (ViaCEP).
Não participa da validação de dígitos verificadores; apenas responde se o CEP existe.
"""
import logging
import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from backend.utils.checksum import RejectionReason, ValidationResult

CEP_LENGTH = 8
CEP_SERVICE_URL = os.getenv("CEP_SERVICE_URL", "https://viacep.com.br/ws")
CEP_TIMEOUT = float(os.getenv("CEP_TIMEOUT", "5"))
CEP_CONNECT_TIMEOUT = float(os.getenv("CEP_CONNECT_TIMEOUT", "10"))

logger = logging.getLogger("cep_utils")


class CepLookupError(Exception):
    """Falha ao consultar o serviço de CEP (rede, status ou resposta inválida)."""


@dataclass(frozen=True)
class CepLookupResult:
    cep: str
    found: bool
    address: Dict[str, Any] = field(default_factory=dict)


def normalize_cep(cep: str) -> str:
    """Exemplo: '01001-000' -> '01001000'"""
    return re.sub(r'[^0-9]', '', cep or '')


def validate_cep(cep: str) -> ValidationResult:
    """Verifica apenas o formato (8 dígitos), sem consulta externa."""
    cep = normalize_cep(cep)
    if len(cep) != CEP_LENGTH:
        return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
    return ValidationResult.accept(cep)


async def lookup_postal_code(cep: str, client: Optional[httpx.AsyncClient] = None) -> CepLookupResult:
    """
    Consulta o CEP no serviço externo.
    Parâmetros:
        cep (str): CEP em qualquer formato
        client (httpx.AsyncClient, opcional): cliente HTTP reutilizável
    Retorno:
        CepLookupResult: found=False para CEP mal formado ou inexistente
    Exceções:
        CepLookupError: erro de rede, status diferente de 200 ou corpo inválido
    """
    checked = validate_cep(cep)
    if not checked.is_valid:
        logger.warning(f"CEP com formato inválido, consulta não realizada: cep={cep}")
        return CepLookupResult(cep=normalize_cep(cep), found=False)
    cep = checked.value

    url = f"{CEP_SERVICE_URL}/{cep}/json/"
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=httpx.Timeout(CEP_TIMEOUT, connect=CEP_CONNECT_TIMEOUT))
    try:
        logger.debug(f"Consultando CEP: url={url}")
        resp = await client.get(url)
    except httpx.HTTPError as exc:
        logger.error(f"Erro de comunicação com serviço de CEP: cep={cep}, erro={exc}")
        raise CepLookupError(f"Falha ao consultar CEP {cep}") from exc
    finally:
        if owns_client:
            await client.aclose()

    if resp.status_code != 200:
        logger.error(f"Serviço de CEP respondeu status={resp.status_code} para cep={cep}")
        raise CepLookupError(f"Serviço de CEP indisponível (status {resp.status_code})")
    try:
        data = resp.json()
    except ValueError as exc:
        raise CepLookupError(f"Resposta inválida do serviço de CEP para {cep}") from exc
    if not isinstance(data, dict):
        raise CepLookupError(f"Resposta inválida do serviço de CEP para {cep}")

    # ViaCEP responde 200 com {"erro": true} para CEP inexistente
    if data.get("erro"):
        logger.info(f"CEP não encontrado: cep={cep}")
        return CepLookupResult(cep=cep, found=False)
    logger.info(f"CEP encontrado: cep={cep}")
    return CepLookupResult(cep=cep, found=True, address=data)
