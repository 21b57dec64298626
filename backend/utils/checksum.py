"""
Base comum dos validadores de documentos: soma ponderada, motivos de rejeição
e o resultado devolvido por todos os validadores.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence


class RejectionReason(str, Enum):
    """Motivos de rejeição possíveis (conjunto fechado)."""
    # Tamanho (ou formato) diferente do exigido pelo documento
    WRONG_LENGTH = "wrong_length"
    # Dígitos verificadores calculados não conferem com os informados
    CHECKSUM_MISMATCH = "checksum_mismatch"


@dataclass(frozen=True)
class ValidationResult:
    """
    Resultado de uma validação.
    Atributos:
        value (str | None): documento normalizado, quando aceito
        reason (RejectionReason | None): motivo, quando rejeitado
    """
    value: Optional[str] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def accept(cls, value: str) -> "ValidationResult":
        return cls(value=value)

    @classmethod
    def reject(cls, reason: RejectionReason) -> "ValidationResult":
        return cls(reason=reason)

    @property
    def is_valid(self) -> bool:
        return self.reason is None


def weighted_checksum(digits: Sequence, weights: Sequence[int], modulus: int = 11) -> int:
    """
    Soma ponderada posicional reduzida pelo módulo.
    Parâmetros:
        digits: sequência de dígitos (str ou int)
        weights: pesos, um por posição
        modulus (int): módulo da redução
    Retorno:
        int: sum(digit[i] * weight[i]) % modulus
    Exemplo: weighted_checksum('123', (3, 2, 1)) -> 10
    """
    if len(digits) != len(weights):
        # Erro de programação do chamador, não do documento
        raise ValueError(f"digits e weights com tamanhos diferentes: {len(digits)} != {len(weights)}")
    return sum(int(d) * w for d, w in zip(digits, weights)) % modulus


def mod11_ten_to_zero(remainder: int) -> int:
    """Remapeia resto 10 -> 0 (CPF e IE)."""
    return 0 if remainder == 10 else remainder
