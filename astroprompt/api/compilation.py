"""POST /api/compile: prompt compilation for one record or a batch."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from astroprompt.dependencies import get_compiler
from astroprompt.engine.compiler import PromptCompiler
from astroprompt.models.compilation import BatchReport, CompilationResult
from astroprompt.models.records import ObjectRecord
from astroprompt.models.requests import BatchCompileRequest

router = APIRouter()


@router.post("/compile", response_model=CompilationResult)
def compile_record(
    record: ObjectRecord,
    compiler: PromptCompiler = Depends(get_compiler),
) -> CompilationResult:
    """Compile one catalog record into a prompt, negative prompt and confidence."""
    return compiler.compile(record)


@router.post("/compile/batch", response_model=BatchReport)
def compile_batch(
    req: BatchCompileRequest,
    compiler: PromptCompiler = Depends(get_compiler),
) -> BatchReport:
    """Compile many records; malformed rows come back as error rows."""
    return compiler.compile_batch(req.records)
