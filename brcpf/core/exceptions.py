"""
Validation errors raised while parsing CPF numbers.
"""

from django.db import models


class InvalidCPFReason(models.TextChoices):
    """Motivo da rejeição de um CPF."""

    WRONG_LENGTH = "wrong_length", "must contain exactly 11 digits"
    ALL_DIGITS_EQUAL = "all_digits_equal", "all digits are equal"
    BAD_FIRST_VERIFIER = "bad_first_verifier", "first verifier digit should be {expected}"
    BAD_SECOND_VERIFIER = "bad_second_verifier", "second verifier digit should be {expected}"


class InvalidCPFError(ValueError):
    """
    Raised when a string cannot be turned into a CPF.

    ``value`` is the input exactly as received (before normalization), so the
    message shows what the user actually typed.
    """

    def __init__(self, value: str, reason: InvalidCPFReason, expected: int | None = None):
        self.value = value
        self.reason = reason
        self.expected = expected
        super().__init__(f"Invalid CPF '{value}': {self.detail}")

    @property
    def detail(self) -> str:
        """Reason text without the ``Invalid CPF '...'`` prefix."""
        return self.reason.label.format(expected=self.expected)

    @property
    def code(self) -> str:
        return self.reason.value

    def __reduce__(self):
        return (self.__class__, (self.value, self.reason, self.expected))
