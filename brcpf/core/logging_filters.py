"""
Logging filter that keeps full CPF numbers out of log output (LGPD).
"""

import logging

from brcpf.core.conf import get_cpf_config
from brcpf.core.cpf import mask_cpfs


class CPFMaskingFilter(logging.Filter):
    """Rewrites CPF-shaped substrings in the rendered message to ***.XXX.XXX-**."""

    def filter(self, record):
        if not get_cpf_config()["MASK_LOGS"]:
            return True
        message = record.getMessage()
        masked = mask_cpfs(message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True
