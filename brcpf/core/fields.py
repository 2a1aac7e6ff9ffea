"""
Model field that stores a CPF as its 11 raw digits.

Values read back from the database go through the full validator again, so a
corrupted row raises InvalidCPFError instead of producing an invalid CPF.
"""

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _

from brcpf.core.cpf import CPF, CPF_LENGTH, parse
from brcpf.core.exceptions import InvalidCPFError
from brcpf.core.forms import FORMATTED_LENGTH, CPFFormField


class CPFField(models.CharField):
    """CharField that returns CPF instances."""

    description = _("CPF (11 dígitos)")

    def __init__(self, *args, **kwargs):
        kwargs["max_length"] = CPF_LENGTH
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        del kwargs["max_length"]
        return name, path, args, kwargs

    def from_db_value(self, value, expression, connection):
        """Re-validate on read."""
        if value is None or value == "":
            return value
        return parse(value)

    def to_python(self, value):
        if value is None or value == "" or isinstance(value, CPF):
            return value
        try:
            return parse(str(value))
        except InvalidCPFError as exc:
            raise ValidationError(str(exc), code=exc.code) from exc

    def get_prep_value(self, value):
        """Store the raw digits, never the formatted form."""
        value = self.to_python(value)
        if isinstance(value, CPF):
            return value.raw()
        return value

    def run_validators(self, value):
        if isinstance(value, CPF):
            value = value.raw()
        super().run_validators(value)

    def formfield(self, **kwargs):
        return super().formfield(
            **{"form_class": CPFFormField, "max_length": FORMATTED_LENGTH, **kwargs}
        )
