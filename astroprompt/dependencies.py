"""FastAPI dependency injection."""

from __future__ import annotations

from astroprompt.audit.store import GenerationLogStore, get_log_store
from astroprompt.config import Settings, settings
from astroprompt.engine.compiler import PromptCompiler
from astroprompt.engine.config import CompilerConfig


def get_settings() -> Settings:
    return settings


def get_store() -> GenerationLogStore:
    return get_log_store()


def get_compiler() -> PromptCompiler:
    """Compiler wired to the process log store and current settings."""
    store = get_log_store()
    config = CompilerConfig(
        derive_features_from_spectral=settings.derive_features_from_spectral,
        enable_logging=settings.enable_generation_logging,
        log_capacity=store.capacity,
    )
    return PromptCompiler(config=config, log_store=store)
