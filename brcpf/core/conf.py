"""
Library settings, read from ``settings.CPF_CONFIG`` with defaults.
"""

from django.conf import settings

DEFAULTS = {
    # Form fields render bound CPFs as 123.456.789-09 instead of raw digits.
    "FORM_DISPLAY_FORMATTED": True,
    # Rejected input is masked before it reaches the logs (LGPD).
    "MASK_LOGS": True,
}


def get_cpf_config() -> dict:
    """Return CPF_CONFIG merged over the defaults."""
    if not settings.configured:
        return dict(DEFAULTS)
    return {**DEFAULTS, **getattr(settings, "CPF_CONFIG", {})}
