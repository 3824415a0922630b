"""Input shape checks shared by the public entry points."""
from __future__ import annotations

import math
import numbers
from typing import Any, List, Optional, Sequence

from speech_coach.exceptions import InvalidArgumentError


def require_text(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(name, f"expected str, got {type(value).__name__}")
    return value


def require_tokens(name: str, value: Any) -> List[str]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidArgumentError(name, f"expected a sequence of str, got {type(value).__name__}")
    for index, token in enumerate(value):
        if not isinstance(token, str):
            raise InvalidArgumentError(
                name, f"item {index} is {type(token).__name__}, expected str"
            )
    return list(value)


def _require_real(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(name, f"expected a number, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidArgumentError(name, "must be a finite number")
    return value


def require_duration(name: str, value: Any) -> float:
    value = _require_real(name, value)
    if value < 0:
        raise InvalidArgumentError(name, "must not be negative")
    return value


def require_sample_rate(name: str, value: Any) -> int:
    value = _require_real(name, value)
    if value <= 0 or not value.is_integer():
        raise InvalidArgumentError(name, "must be a positive whole number")
    return int(value)


def require_confidence(name: str, value: Any) -> Optional[float]:
    """None, or a finite number; provider confidences are not range-checked."""
    if value is None:
        return None
    return _require_real(name, value)
