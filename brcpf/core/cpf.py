"""
CPF (Cadastro de Pessoas Físicas) value object.

Every ``CPF`` instance holds 11 digits that satisfy the checksum. Instances
are created only by :func:`parse` (untrusted input) or :func:`random_cpf`
(valid by construction); calling ``CPF(...)`` directly is an error.
"""

import logging
import random
import re
from collections.abc import Sequence

from brcpf.core.conf import get_cpf_config
from brcpf.core.exceptions import InvalidCPFError, InvalidCPFReason

logger = logging.getLogger(__name__)

CPF_LENGTH = 11

_NON_DIGITS = re.compile(r"[^0-9]")
_CPF_SHAPED = re.compile(r"(?<!\d)\d{3}\.?(\d{3})\.?(\d{3})-?\d{2}(?!\d)")

_default_random = random.Random()

# Only this module holds the token, so only parse() and random_cpf() build CPFs.
_CONSTRUCTION_TOKEN = object()


def digit_verifier(digits: Sequence[int]) -> int:
    """Mod-11 verifier digit for 9 (first) or 10 (second) digits."""
    weight = len(digits) + 1
    total = sum(digit * (weight - i) for i, digit in enumerate(digits))
    rest = total % 11
    return 0 if rest < 2 else 11 - rest


def normalize(value: str) -> str:
    """Remove everything that is not an ASCII digit: '123.456.789-09' -> '12345678909'."""
    return _NON_DIGITS.sub("", value)


def mask_cpfs(text: str) -> str:
    """Replace every CPF-shaped substring with ***.DDD.DDD-**."""
    return _CPF_SHAPED.sub(lambda m: f"***.{m.group(1)}.{m.group(2)}-**", text)


class CPF:
    """
    Validated CPF number.

    Immutable, hashable and totally ordered by its digits. ``str()`` gives the
    raw digits; ``repr()`` only shows the masked form so it is safe in logs.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str, *, _token: object = None):
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError("CPF cannot be instantiated directly; use CPF.parse() or CPF.random()")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError("CPF is immutable")

    def __delattr__(self, name):
        raise AttributeError("CPF is immutable")

    @classmethod
    def parse(cls, value: str) -> "CPF":
        return parse(value)

    @classmethod
    def try_parse(cls, value: str) -> "CPF | None":
        return try_parse(value)

    @classmethod
    def random(cls, source: random.Random | None = None) -> "CPF":
        return random_cpf(source)

    def raw(self) -> str:
        """11 digits, no punctuation."""
        return self._value

    def formatted(self) -> str:
        """XXX.XXX.XXX-XX"""
        v = self._value
        return f"{v[:3]}.{v[3:6]}.{v[6:9]}-{v[9:]}"

    def masked(self) -> str:
        """***.XXX.XXX-**, formato seguro para logs."""
        v = self._value
        return f"***.{v[3:6]}.{v[6:9]}-**"

    def __eq__(self, other):
        if not isinstance(other, CPF):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, CPF):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, CPF):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, CPF):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, CPF):
            return NotImplemented
        return self._value >= other._value

    def __hash__(self):
        return hash(self._value)

    def __str__(self):
        return self._value

    def __repr__(self):
        return f"CPF({self.masked()!r})"

    def __reduce__(self):
        # Unpickling goes through the validator again.
        return (parse, (self._value,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


def _check(value: str) -> str:
    """
    Validate ``value`` and return its normalized digits.

    Checks run in a fixed order (length, repeated digits, first verifier,
    second verifier) and the first failing one is reported.
    """
    digits = normalize(value)

    if len(digits) != CPF_LENGTH:
        raise InvalidCPFError(value, InvalidCPFReason.WRONG_LENGTH)

    if digits == digits[0] * CPF_LENGTH:
        raise InvalidCPFError(value, InvalidCPFReason.ALL_DIGITS_EQUAL)

    numbers = [int(d) for d in digits]
    first_digits = numbers[:9]

    first_verifier = digit_verifier(first_digits)
    if first_verifier != numbers[9]:
        raise InvalidCPFError(value, InvalidCPFReason.BAD_FIRST_VERIFIER, first_verifier)

    second_verifier = digit_verifier(first_digits + [first_verifier])
    if second_verifier != numbers[10]:
        raise InvalidCPFError(value, InvalidCPFReason.BAD_SECOND_VERIFIER, second_verifier)

    return digits


def parse(value: str) -> CPF:
    """
    Parse a CPF with or without punctuation.

    Raises:
        TypeError: if ``value`` is not a string.
        InvalidCPFError: if the digits are not a valid CPF.
    """
    if not isinstance(value, str):
        raise TypeError(f"CPF must be parsed from str, not {type(value).__name__}")
    try:
        digits = _check(value)
    except InvalidCPFError as exc:
        shown = mask_cpfs(value) if get_cpf_config()["MASK_LOGS"] else value
        logger.debug("CPF rejeitado (%s): %r", exc.code, shown)
        raise
    return CPF(digits, _token=_CONSTRUCTION_TOKEN)


def try_parse(value: str) -> CPF | None:
    """Like :func:`parse`, but returns None instead of raising InvalidCPFError."""
    try:
        return parse(value)
    except InvalidCPFError:
        return None


def random_cpf(source: random.Random | None = None) -> CPF:
    """
    Generate a valid random CPF.

    ``source`` is anything with ``randrange`` (e.g. ``random.Random(seed)``);
    a module-level generator is used when omitted.
    """
    source = source if source is not None else _default_random
    while True:
        first_digits = [source.randrange(10) for _ in range(9)]
        if len(set(first_digits)) > 1:
            break

    first_verifier = digit_verifier(first_digits)
    second_verifier = digit_verifier(first_digits + [first_verifier])
    digits = "".join(str(d) for d in first_digits + [first_verifier, second_verifier])
    return CPF(digits, _token=_CONSTRUCTION_TOKEN)


def compare(a: CPF, b: CPF) -> int:
    """-1, 0 or 1, ordering CPFs by their digits."""
    if a == b:
        return 0
    return -1 if a < b else 1
