"""astroprompt prompt compilation engine."""

from astroprompt.engine.compiler import PromptCompiler, create_compiler
from astroprompt.engine.config import CompilerConfig
from astroprompt.engine.negative import get_negative_prompt
from astroprompt.engine.spectral import ParsedSpectralType, parse_spectral_type
from astroprompt.engine.validation import validate_prompt

__all__ = [
    "PromptCompiler",
    "create_compiler",
    "CompilerConfig",
    "get_negative_prompt",
    "ParsedSpectralType",
    "parse_spectral_type",
    "validate_prompt",
]
