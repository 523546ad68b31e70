"""
Statistical language detection backed by langdetect.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

import structlog
from langdetect import DetectorFactory, LangDetectException
from langdetect.detector_factory import PROFILES_DIRECTORY

logger = structlog.get_logger(__name__)

UNKNOWN_LANGUAGE = "unknown"

# langdetect codes for the languages reported under a fixed code
LANGUAGE_CODES: Dict[str, str] = {
    "en": "en",
    "es": "es",
    "fr": "fr",
    "de": "de",
    "it": "it",
    "pt": "pt",
    "ru": "ru",
    "ja": "ja",
    "ko": "ko",
    "zh-cn": "zh",
    "zh-tw": "zh",
}


class LanguageDetector:
    """
    Seeded langdetect wrapper.

    langdetect's module-level ``detect`` shares one global factory whose
    seed can be changed by any caller, so each detector owns its own
    factory. Profiles are loaded on first use.
    """

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        self._factory: Optional[DetectorFactory] = None
        self._lock = threading.Lock()

    def _get_factory(self) -> DetectorFactory:
        if self._factory is None:
            with self._lock:
                if self._factory is None:
                    factory = DetectorFactory()
                    factory.load_profile(PROFILES_DIRECTORY)
                    factory.seed = self.seed
                    self._factory = factory
        return self._factory

    def detect(self, text: str) -> str:
        """
        Detect the language of ``text``.

        Returns:
            A short language code, or "unknown" when detection fails
        """
        if not text or not text.strip():
            return UNKNOWN_LANGUAGE

        try:
            detector = self._get_factory().create()
            detector.append(text)
            code = detector.detect()
        except LangDetectException as e:
            logger.debug("Language detection failed", error=str(e))
            return UNKNOWN_LANGUAGE

        return self.map_code(code)

    @staticmethod
    def map_code(code: str) -> str:
        code = code.lower()
        return LANGUAGE_CODES.get(code, code)
