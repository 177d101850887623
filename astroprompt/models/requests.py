"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class BatchCompileRequest(BaseModel):
    # Rows stay raw so a malformed record fails its own row, not the request
    records: list[dict[str, Any]] = Field(..., description="Catalog object records")


class ValidateRequest(BaseModel):
    prompt: str = Field(..., description="Compiled prompt text to check")
