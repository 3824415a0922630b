from .logger import get_logger
from .numeric import clamp, round_half_up
from .validation import (
    require_confidence,
    require_duration,
    require_sample_rate,
    require_text,
    require_tokens,
)

__all__ = [
    "get_logger",
    "clamp",
    "round_half_up",
    "require_confidence",
    "require_duration",
    "require_sample_rate",
    "require_text",
    "require_tokens",
]
