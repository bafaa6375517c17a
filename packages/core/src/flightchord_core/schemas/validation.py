"""Consistency check result schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from .enums import CheckCategory, ResultKind


class ValidationResult(BaseModel):
    """One finding reported by the consistency checker."""

    kind: ResultKind
    category: CheckCategory
    message: str
    details: dict[str, Any] | None = None

    @property
    def is_error(self) -> bool:
        return self.kind == ResultKind.ERROR
