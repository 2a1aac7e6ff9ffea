"""
Django validators for CPF numbers.
"""

from django.core.exceptions import ValidationError

from brcpf.core.cpf import parse, try_parse
from brcpf.core.exceptions import InvalidCPFError


def validar_cpf(cpf: str) -> bool:
    """Valida CPF brasileiro."""
    return try_parse(cpf) is not None


def validate_cpf(value) -> None:
    """Raise ValidationError unless ``value`` is a valid CPF (masked or not)."""
    try:
        parse(str(value))
    except InvalidCPFError as exc:
        raise ValidationError(str(exc), code=exc.code) from exc
