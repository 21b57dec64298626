"""
Validação de CNPJ (dígitos verificadores módulo 11).
"""
import re

from backend.utils.checksum import RejectionReason, ValidationResult, weighted_checksum

CNPJ_LENGTH = 14
CNPJ_WEIGHTS_1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_WEIGHTS_2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


def _cnpj_digit(remainder: int) -> int:
    # Restos 0 e 1 viram 0; os demais, 11 - resto
    return 0 if remainder < 2 else 11 - remainder


class CNPJUtils:
    @staticmethod
    def normalize_cnpj(cnpj: str) -> str:
        """
        Remove caracteres não numéricos do CNPJ.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return re.sub(r'[^0-9]', '', cnpj or '')

    @staticmethod
    def validate_cnpj(cnpj: str) -> ValidationResult:
        """
        Valida CNPJ pelos dois dígitos verificadores.
        Parâmetros:
            cnpj (str): CNPJ em qualquer formato
        Retorno:
            ValidationResult: CNPJ normalizado ou motivo da rejeição
        """
        cnpj = CNPJUtils.normalize_cnpj(cnpj)
        if len(cnpj) != CNPJ_LENGTH:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        r1 = _cnpj_digit(weighted_checksum(cnpj[:12], CNPJ_WEIGHTS_1))
        r2 = _cnpj_digit(weighted_checksum(cnpj[:13], CNPJ_WEIGHTS_2))
        if r1 != int(cnpj[12]) or r2 != int(cnpj[13]):
            return ValidationResult.reject(RejectionReason.CHECKSUM_MISMATCH)
        return ValidationResult.accept(cnpj)

    @staticmethod
    def is_valid_cnpj(cnpj: str) -> bool:
        return CNPJUtils.validate_cnpj(cnpj).is_valid


validate_cnpj = CNPJUtils.validate_cnpj
