"""
Validação de RG (layout de São Paulo): 8 dígitos + dígito verificador,
que pode ser X quando o cálculo resulta em 10.
"""
import re

from backend.utils.checksum import RejectionReason, ValidationResult, weighted_checksum

RG_LENGTH = 9
RG_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9)
RG_CHECK_LETTER = "X"


class RGUtils:
    @staticmethod
    def normalize_rg(rg: str) -> str:
        """
        Mantém apenas dígitos e X (maiúsculo).
        Exemplo: ' 12.345.668-x ' -> '12345668X'
        """
        return re.sub(r'[^0-9X]', '', (rg or '').upper())

    @staticmethod
    def validate_rg(rg: str) -> ValidationResult:
        """
        Valida RG.
        Parâmetros:
            rg (str): RG em qualquer formato
        Retorno:
            ValidationResult: RG normalizado ou motivo da rejeição
        """
        rg = RGUtils.normalize_rg(rg)
        if len(rg) != RG_LENGTH or RG_CHECK_LETTER in rg[:8]:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        r = 11 - weighted_checksum(rg[:8], RG_WEIGHTS)
        if r == 11:
            r = 0
        if rg[8] == RG_CHECK_LETTER:
            ok = r == 10
        else:
            ok = r == int(rg[8])
        if not ok:
            return ValidationResult.reject(RejectionReason.CHECKSUM_MISMATCH)
        return ValidationResult.accept(rg)

    @staticmethod
    def is_valid_rg(rg: str) -> bool:
        return RGUtils.validate_rg(rg).is_valid


validate_rg = RGUtils.validate_rg
