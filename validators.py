# validators.py
from __future__ import annotations

import math
from typing import Any


class Validator:
    """Shared field checks for the demo models and settings."""

    # Validation

    @staticmethod
    def require_non_empty(name: str, value: Any) -> str:
        """Field must not be empty or whitespace."""
        if value is None:
            raise ValueError(f"Field '{name}' is required and cannot be empty.")
        v = str(value).strip()
        if not v:
            raise ValueError(f"Field '{name}' is required and cannot be empty.")
        return v

    @staticmethod
    def positive_int(name: str, value: Any) -> int:
        """Whole number greater than zero. Digit strings are accepted, bools are not."""
        if isinstance(value, bool):
            raise ValueError(f"Field '{name}' must be a positive integer, got {value!r}.")
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value.strip())
        if not isinstance(value, int) or value <= 0:
            raise ValueError(f"Field '{name}' must be a positive integer, got {value!r}.")
        return value

    @staticmethod
    def non_negative_number(name: str, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Field '{name}' must be a number, got {value!r}.")
        if not math.isfinite(value):
            raise ValueError(f"Field '{name}' must be a finite number, got {value!r}.")
        if value < 0:
            raise ValueError(f"Field '{name}' cannot be negative, got {value!r}.")
        return float(value)

    @staticmethod
    def one_of(name: str, value: Any, choices: tuple[str, ...]) -> str:
        """Case-insensitive choice; returns the lower-cased value."""
        v = Validator.require_non_empty(name, value).lower()
        if v not in choices:
            raise ValueError(
                f"Field '{name}' must be one of {', '.join(choices)}; got '{value}'."
            )
        return v
