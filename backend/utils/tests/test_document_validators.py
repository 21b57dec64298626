import pytest

from backend.utils.checksum import RejectionReason, ValidationResult, weighted_checksum
from backend.utils.cnpj_utils import CNPJUtils, validate_cnpj
from backend.utils.cpf_utils import CPFUtils, validate_cpf
from backend.utils.documents import DocumentType, validate_document
from backend.utils.ie_utils import IEUtils, IEVariant, validate_ie
from backend.utils.rg_utils import RGUtils, validate_rg

VALID_CPFS = ["52998224725", "09702414458", "12345678909"]
VALID_CNPJS = ["11222333000181", "33000167000101"]
VALID_IES = ["110042490114", "P0110042430020"]
VALID_RGS = ["123456782", "123456770", "12345668X", "00000005X"]


def _increment(value: str, pos: int) -> str:
    return value[:pos] + str((int(value[pos]) + 1) % 10) + value[pos + 1:]


######### Soma ponderada
def test_weighted_checksum():
    assert weighted_checksum("123", (3, 2, 1)) == 10
    assert weighted_checksum([1, 2, 3], (3, 2, 1), modulus=10) == 0


def test_weighted_checksum_length_mismatch_is_programming_error():
    with pytest.raises(ValueError):
        weighted_checksum("123", (1, 2))


######### CPF
def test_cpf_formatted_is_normalized_and_accepted():
    result = validate_cpf("529.982.247-25")
    assert result == ValidationResult.accept("52998224725")
    assert result.is_valid


@pytest.mark.parametrize("cpf", VALID_CPFS)
def test_cpf_valid(cpf):
    assert validate_cpf(cpf).value == cpf
    assert CPFUtils.is_valid_cpf(cpf)


@pytest.mark.parametrize("cpf", ["", None, "1234567890", "123456789012", "abc.def.ghi-jk"])
def test_cpf_wrong_length(cpf):
    assert validate_cpf(cpf).reason is RejectionReason.WRONG_LENGTH


@pytest.mark.parametrize("cpf", ["５２９.９８２.２４７-２５", "٥٢٩٩٨٢٢٤٧٢٥"])
def test_cpf_non_ascii_digits_are_discarded(cpf):
    assert validate_cpf(cpf).reason is RejectionReason.WRONG_LENGTH


def test_cnpj_non_ascii_digits_are_discarded():
    assert validate_cnpj("１１.２２２.３３３/０００１-８１").reason is RejectionReason.WRONG_LENGTH


def test_cpf_checksum_mismatch():
    result = validate_cpf("12345678900")
    assert not result.is_valid
    assert result.value is None
    assert result.reason is RejectionReason.CHECKSUM_MISMATCH


@pytest.mark.parametrize("cpf", ["52998224725", "09702414458"])
@pytest.mark.parametrize("pos", range(9))
def test_cpf_single_digit_change_is_detected(cpf, pos):
    assert validate_cpf(_increment(cpf, pos)).reason is RejectionReason.CHECKSUM_MISMATCH


@pytest.mark.parametrize("digit", "0123456789")
def test_cpf_repeated_digits_follow_the_arithmetic(digit):
    # 10..2 somam 54 e 11..2 somam 65; 540 e 650 deixam resto 1 em 11,
    # então os dois dígitos verificadores repetem o próprio dígito
    assert validate_cpf(digit * 11).is_valid


######### CNPJ
def test_cnpj_formatted_is_normalized_and_accepted():
    assert validate_cnpj("11.222.333/0001-81").value == "11222333000181"


@pytest.mark.parametrize("cnpj", VALID_CNPJS)
def test_cnpj_valid(cnpj):
    assert validate_cnpj(cnpj).value == cnpj
    assert CNPJUtils.is_valid_cnpj(cnpj)


@pytest.mark.parametrize("cnpj", ["1122233300018", "112223330001810", "11.222.333/0001-8", ""])
def test_cnpj_wrong_length(cnpj):
    assert validate_cnpj(cnpj).reason is RejectionReason.WRONG_LENGTH


@pytest.mark.parametrize("cnpj", ["11222333000182", "11222333000171", "33000167000102"])
def test_cnpj_altered_check_digit(cnpj):
    assert validate_cnpj(cnpj).reason is RejectionReason.CHECKSUM_MISMATCH


######### IE
def test_ie_variant_detection():
    assert IEUtils.detect_variant("P0110042430020") is IEVariant.RURAL_PRODUCER
    assert IEUtils.detect_variant("110042490114") is IEVariant.STANDARD


def test_ie_standard_formatted():
    assert validate_ie("110.042.490.114").value == "110042490114"


def test_ie_rural_producer_lowercase_letter_is_uppercased():
    assert validate_ie("p-01100424.3/0020").value == "P0110042430020"


@pytest.mark.parametrize("ie", VALID_IES)
def test_ie_valid(ie):
    assert IEUtils.is_valid_ie(ie)


@pytest.mark.parametrize("ie", ["11004249011", "1100424901145", "P011004243002", "P01100424300201", ""])
def test_ie_wrong_length(ie):
    assert validate_ie(ie).reason is RejectionReason.WRONG_LENGTH


def test_ie_misplaced_letter():
    assert validate_ie("0110042430020P").reason is RejectionReason.WRONG_LENGTH


@pytest.mark.parametrize("ie", ["110042491114", "110042490115", "P0110042440020"])
def test_ie_checksum_mismatch(ie):
    assert validate_ie(ie).reason is RejectionReason.CHECKSUM_MISMATCH


######### RG
@pytest.mark.parametrize("rg", VALID_RGS)
def test_rg_valid(rg):
    assert validate_rg(rg).value == rg
    assert RGUtils.is_valid_rg(rg)


@pytest.mark.parametrize("rg", ["12.345.668-X", " 12.345.668-x ", "12345668x"])
def test_rg_check_letter_case_and_spacing(rg):
    assert validate_rg(rg).value == "12345668X"


@pytest.mark.parametrize("rg", ["12345678", "1234567823", "1234X6782", ""])
def test_rg_wrong_length(rg):
    assert validate_rg(rg).reason is RejectionReason.WRONG_LENGTH


@pytest.mark.parametrize("rg", ["123456783", "12345678X", "123456680"])
def test_rg_checksum_mismatch(rg):
    assert validate_rg(rg).reason is RejectionReason.CHECKSUM_MISMATCH


######### Despacho e idempotência
@pytest.mark.parametrize(
    "document_type, value",
    [(DocumentType.CPF, v) for v in VALID_CPFS]
    + [(DocumentType.CNPJ, v) for v in VALID_CNPJS]
    + [(DocumentType.IE, v) for v in VALID_IES]
    + [(DocumentType.RG, v) for v in VALID_RGS],
)
def test_accepted_value_is_stable(document_type, value):
    first = validate_document(document_type, value)
    assert first.is_valid
    assert validate_document(document_type, first.value) == first


def test_validate_document_accepts_type_name():
    assert validate_document("cnpj", "11222333000181").is_valid
