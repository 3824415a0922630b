"""Environment-driven settings for the speech_coach package."""
from __future__ import annotations

import os
from typing import Optional

# Log level applied by utils.logger.get_logger
LOG_LEVEL = os.getenv("SPEECH_COACH_LOG_LEVEL", "WARNING").upper()

# Extra directory searched for NLTK data (tagger models)
NLTK_DATA_DIR: Optional[str] = os.getenv("SPEECH_COACH_NLTK_DATA") or None
