import brcpf
from brcpf.core.cpf import parse


def test_top_level_exports():
    cpf = brcpf.parse("123.456.789-09")
    assert cpf == parse("12345678909")
    assert brcpf.try_parse("123") is None
    assert isinstance(brcpf.random_cpf(), brcpf.CPF)
    assert brcpf.compare(cpf, cpf) == 0
    assert issubclass(brcpf.InvalidCPFError, ValueError)
    assert brcpf.InvalidCPFReason.WRONG_LENGTH == "wrong_length"
