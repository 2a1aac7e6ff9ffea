"""
Validated CPF numbers for Django projects.
"""

from brcpf.core.cpf import CPF, compare, parse, random_cpf, try_parse
from brcpf.core.exceptions import InvalidCPFError, InvalidCPFReason

__all__ = [
    "CPF",
    "InvalidCPFError",
    "InvalidCPFReason",
    "compare",
    "parse",
    "random_cpf",
    "try_parse",
]
