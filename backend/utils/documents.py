"""
Ponto único de despacho: um validador por tipo de documento.
"""
from enum import Enum
from typing import Callable, Dict

from backend.utils.checksum import ValidationResult
from backend.utils.cnpj_utils import validate_cnpj
from backend.utils.cpf_utils import validate_cpf
from backend.utils.ie_utils import validate_ie
from backend.utils.rg_utils import validate_rg


class DocumentType(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
    IE = "ie"
    RG = "rg"


VALIDATORS: Dict[DocumentType, Callable[[str], ValidationResult]] = {
    DocumentType.CPF: validate_cpf,
    DocumentType.CNPJ: validate_cnpj,
    DocumentType.IE: validate_ie,
    DocumentType.RG: validate_rg,
}


def validate_document(document_type: DocumentType, candidate: str) -> ValidationResult:
    """
    Valida o documento com o algoritmo do seu tipo.
    Parâmetros:
        document_type (DocumentType): tipo do documento
        candidate (str): valor informado
    Retorno:
        ValidationResult
    """
    return VALIDATORS[DocumentType(document_type)](candidate)
