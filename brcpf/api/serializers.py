"""
API Serializers.
"""

from rest_framework import serializers

from brcpf.core.cpf import CPF, parse
from brcpf.core.exceptions import InvalidCPFError


class CPFField(serializers.Field):
    """
    Serializer field for CPF values.

    Output is always the raw 11 digits. Input is validated with the same
    rules as ``CPF.parse``; the rejection reason becomes the error code.
    """

    default_error_messages = {
        "invalid": "Expected a string but got type {input_type}.",
    }

    def to_representation(self, value):
        if not isinstance(value, CPF):
            value = parse(str(value))
        return value.raw()

    def to_internal_value(self, data):
        if isinstance(data, CPF):
            return data
        if not isinstance(data, str):
            self.fail("invalid", input_type=type(data).__name__)
        try:
            return parse(data)
        except InvalidCPFError as exc:
            raise serializers.ValidationError(str(exc), code=exc.code) from exc

