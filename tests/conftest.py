"""Shared test fixtures."""

from __future__ import annotations

import pytest

from astroprompt.audit.store import GenerationLogStore
from astroprompt.engine.compiler import PromptCompiler
from astroprompt.engine.config import CompilerConfig


# Catalog records as the storefront sends them (camelCase keys)

BETELGEUSE = {
    "id": 1,
    "name": "Betelgeuse",
    "objectType": "Star",
    "spectralType": "M2Iab",
    "massSolar": 16.5,
}

PROXIMA = {
    "id": 2,
    "name": "Proxima Centauri",
    "objectType": "Star",
    "spectralType": "M5.5Ve",
}

EAGLE_NEBULA = {
    "id": 3,
    "name": "Eagle Nebula",
    "objectType": "Nebula",
    "description": "Young open cluster and star-forming region in Serpens",
}

BARRED_SPIRAL = {
    "id": 4,
    "name": "NGC 1300",
    "objectType": "Galaxy",
    "description": "A barred spiral galaxy in Eridanus",
}

UNKNOWN_OBJECT = {
    "id": 5,
    "name": "XYZ-001",
    "objectType": "Unknown",
}

PLUTO = {
    "id": 6,
    "name": "Pluto",
    "objectType": "Dwarf Planet",
    "visualFeatures": '["Heart-shaped Tombaugh Regio", "Sputnik Planitia ice plain"]',
}

CYGNUS_X1 = {
    "id": 7,
    "name": "Cygnus X-1",
    "objectType": "Black Hole",
    "massSolar": 21.2,
}


@pytest.fixture
def log_store() -> GenerationLogStore:
    return GenerationLogStore(capacity=100)


@pytest.fixture
def compiler(log_store: GenerationLogStore) -> PromptCompiler:
    return PromptCompiler(config=CompilerConfig(log_capacity=100), log_store=log_store)


@pytest.fixture
def betelgeuse() -> dict:
    return dict(BETELGEUSE)


@pytest.fixture
def eagle_nebula() -> dict:
    return dict(EAGLE_NEBULA)
