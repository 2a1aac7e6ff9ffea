from django import forms
from django.core.exceptions import ValidationError

from brcpf.core.conf import get_cpf_config
from brcpf.core.cpf import CPF, parse
from brcpf.core.exceptions import InvalidCPFError

# "123.456.789-09"
FORMATTED_LENGTH = 14


class CPFFormField(forms.CharField):
    """Form field that cleans user input into a CPF instance."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", FORMATTED_LENGTH)
        super().__init__(**kwargs)

    def to_python(self, value):
        if isinstance(value, CPF):
            return value
        value = super().to_python(value)
        if value in self.empty_values:
            return self.empty_value
        try:
            return parse(value)
        except InvalidCPFError as exc:
            raise ValidationError(str(exc), code=exc.code) from exc

    def run_validators(self, value):
        if isinstance(value, CPF):
            value = value.raw()
        super().run_validators(value)

    def prepare_value(self, value):
        if isinstance(value, CPF):
            if get_cpf_config()["FORM_DISPLAY_FORMATTED"]:
                return value.formatted()
            return value.raw()
        return value
