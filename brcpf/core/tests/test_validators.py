"""
Tests for validar_cpf and validate_cpf.
"""

import pytest
from django.core.exceptions import ValidationError

from brcpf.core.validators import validar_cpf, validate_cpf


class TestValidarCPF:
    """Tests for validar_cpf."""

    def test_valid_cpf(self):
        assert validar_cpf("529.982.247-25") is True

    def test_valid_cpf_unmasked(self):
        assert validar_cpf("52998224725") is True

    def test_all_same_digits(self):
        assert validar_cpf("11111111111") is False

    def test_all_zeros(self):
        assert validar_cpf("00000000000") is False

    def test_wrong_length(self):
        assert validar_cpf("1234567") is False

    def test_invalid_checksum(self):
        assert validar_cpf("12345678900") is False

    def test_empty_string(self):
        assert validar_cpf("") is False

    def test_with_mask_invalid(self):
        assert validar_cpf("111.111.111-11") is False


class TestValidateCPF:
    """Tests for the Django validator."""

    def test_valid_passes(self):
        assert validate_cpf("123.456.789-09") is None

    @pytest.mark.parametrize(
        "value,code",
        [
            ("123", "wrong_length"),
            ("222.222.222-22", "all_digits_equal"),
            ("123.456.789-19", "bad_first_verifier"),
            ("123.456.789-00", "bad_second_verifier"),
        ],
    )
    def test_invalid_raises_with_reason_code(self, value, code):
        with pytest.raises(ValidationError) as exc_info:
            validate_cpf(value)
        assert exc_info.value.code == code
        assert exc_info.value.messages[0].startswith(f"Invalid CPF '{value}': ")

    def test_accepts_non_string_values(self):
        """Integers are converted with str() first (leading zeros are lost)."""
        validate_cpf(12345678909)
