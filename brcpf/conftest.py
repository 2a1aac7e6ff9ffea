"""
Shared test fixtures for brcpf.
"""

import random

import factory.random
import pytest
from faker import Faker

VALID_CPFS = [
    "123.456.789-09",
    "529.982.247-25",
    "111.444.777-35",
]


@pytest.fixture(autouse=True)
def _seed_factories():
    """Deterministic CPFs from factories in every test."""
    factory.random.reseed_random("brcpf")


@pytest.fixture
def seeded_random():
    return random.Random(42)


@pytest.fixture
def faker_br():
    fake = Faker("pt_BR")
    fake.seed_instance(1234)
    return fake


@pytest.fixture(params=VALID_CPFS)
def valid_cpf_string(request):
    return request.param


@pytest.fixture
def cpf_config(settings):
    """Mutable copy of CPF_CONFIG restored after the test."""
    settings.CPF_CONFIG = {"FORM_DISPLAY_FORMATTED": True, "MASK_LOGS": True}
    return settings.CPF_CONFIG
