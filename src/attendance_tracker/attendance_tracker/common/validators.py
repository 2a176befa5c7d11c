from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_present(*values: Any, message: str) -> None:
    """Fail unless every value is truthy.

    Values are not trimmed: " " counts as present.
    """
    if not all(values):
        raise ValidationError(message)


def require_scalar(*values: Any, message: str) -> None:
    for v in values:
        if v is not None and not isinstance(v, (str, int, float)):
            raise ValidationError(message)
