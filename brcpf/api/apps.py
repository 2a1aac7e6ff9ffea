"""
API app configuration.
"""

from django.apps import AppConfig


class ApiConfig(AppConfig):
    """Configuration for the REST API bindings."""

    name = "brcpf.api"
    verbose_name = "API"
