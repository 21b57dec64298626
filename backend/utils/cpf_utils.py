"""
Módulo utilitário para validação e normalização de CPF.
Funções reutilizáveis e testáveis, com nomes claros e comentários críticos.
"""
import re

from backend.utils.checksum import RejectionReason, ValidationResult, mod11_ten_to_zero, weighted_checksum

CPF_LENGTH = 11
# Pesos decrescentes: 10..2 para o 1º dígito, 11..2 para o 2º
CPF_WEIGHTS_1 = tuple(range(10, 1, -1))
CPF_WEIGHTS_2 = tuple(range(11, 1, -1))


class CPFUtils:
    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Remove caracteres não numéricos do CPF.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            str: CPF apenas com dígitos
        Exemplo: '123.456.789-09' -> '12345678909'
        """
        return re.sub(r'[^0-9]', '', cpf or '')

    @staticmethod
    def validate_cpf(cpf: str) -> ValidationResult:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            ValidationResult: CPF normalizado ou motivo da rejeição
        """
        cpf = CPFUtils.normalize_cpf(cpf)
        if len(cpf) != CPF_LENGTH:
            return ValidationResult.reject(RejectionReason.WRONG_LENGTH)
        # Sequências repetidas (ex.: 11111111111) não têm tratamento especial
        r1 = mod11_ten_to_zero((weighted_checksum(cpf[:9], CPF_WEIGHTS_1) * 10) % 11)
        r2 = mod11_ten_to_zero((weighted_checksum(cpf[:10], CPF_WEIGHTS_2) * 10) % 11)
        if r1 != int(cpf[9]) or r2 != int(cpf[10]):
            return ValidationResult.reject(RejectionReason.CHECKSUM_MISMATCH)
        return ValidationResult.accept(cpf)

    @staticmethod
    def is_valid_cpf(cpf: str) -> bool:
        """
        Parâmetros:
            cpf (str): CPF em qualquer formato
        Retorno:
            bool: True se válido, False caso contrário
        """
        return CPFUtils.validate_cpf(cpf).is_valid


validate_cpf = CPFUtils.validate_cpf
