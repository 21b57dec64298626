"""
Validação de Inscrição Estadual (layout de São Paulo).

Duas variantes, escolhidas pela presença da letra P:
    - produtor rural: 'P' + 13 dígitos, um dígito verificador na posição 9
    - padrão: 12 dígitos, dígitos verificadores nas posições 8 e 11
"""
import re
from enum import Enum

from backend.utils.checksum import RejectionReason, ValidationResult, mod11_ten_to_zero, weighted_checksum

IE_MARKER = "P"
IE_RURAL_PRODUCER_LENGTH = 14
IE_STANDARD_LENGTH = 12
IE_WEIGHTS_1 = (1, 3, 4, 5, 6, 7, 8, 10)
IE_WEIGHTS_2 = (3, 2, 10, 9, 8, 7, 6, 5, 4, 3, 2)


class IEVariant(str, Enum):
    RURAL_PRODUCER = "rural_producer"
    STANDARD = "standard"


class IEUtils:
    @staticmethod
    def normalize_ie(ie: str) -> str:
        """
        Mantém apenas dígitos e a letra P (maiúscula).
        Exemplo: 'p-01100424.3/0020' -> 'P0110042430020'
        """
        return re.sub(r'[^0-9P]', '', (ie or '').upper())

    @staticmethod
    def detect_variant(ie: str) -> IEVariant:
        """Variante pela presença da letra, em IE já normalizada."""
        return IEVariant.RURAL_PRODUCER if IE_MARKER in ie else IEVariant.STANDARD

    @staticmethod
    def _validate_rural_producer(ie: str) -> ValidationResult:
        if len(ie) != IE_RURAL_PRODUCER_LENGTH:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        # A letra só é aceita na primeira posição
        if not ie.startswith(IE_MARKER) or IE_MARKER in ie[1:]:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        r = mod11_ten_to_zero(weighted_checksum(ie[1:9], IE_WEIGHTS_1))
        if r != int(ie[9]):
            return ValidationResult.reject(RejectionReason.CHECKSUM_MISMATCH)
        return ValidationResult.accept(ie)

    @staticmethod
    def _validate_standard(ie: str) -> ValidationResult:
        if len(ie) != IE_STANDARD_LENGTH:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        r1 = mod11_ten_to_zero(weighted_checksum(ie[:8], IE_WEIGHTS_1))
        r2 = mod11_ten_to_zero(weighted_checksum(ie[:11], IE_WEIGHTS_2))
        if r1 != int(ie[8]) or r2 != int(ie[11]):
            return ValidationResult.reject(RejectionReason.CHECKSUM_MISMATCH)
        return ValidationResult.accept(ie)

    @staticmethod
    def validate_ie(ie: str) -> ValidationResult:
        """
        Valida Inscrição Estadual.
        Parâmetros:
            ie (str): IE em qualquer formato
        Retorno:
            ValidationResult: IE normalizada (letra em maiúscula) ou motivo da rejeição
        """
        ie = IEUtils.normalize_ie(ie)
        variant = IEUtils.detect_variant(ie)
        if variant is IEVariant.RURAL_PRODUCER:
            return IEUtils._validate_rural_producer(ie)
        return IEUtils._validate_standard(ie)

    @staticmethod
    def is_valid_ie(ie: str) -> bool:
        return IEUtils.validate_ie(ie).is_valid


validate_ie = IEUtils.validate_ie
