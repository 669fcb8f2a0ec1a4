from abc import ABC, abstractmethod
from typing import List

from ..errors import ParsingError
from ..settings import settings


class TextRecognizer(ABC):
    """On-device OCR. Implementations live with the client app."""

    def __init__(self, languages: List[str] = None, use_language_correction: bool = True):
        self.languages = languages or list(settings.ocr_languages)
        self.use_language_correction = use_language_correction

    @abstractmethod
    async def recognize(self, image: bytes) -> List[str]:
        """Return recognized lines in the order their regions were detected."""
        pass


async def extract_text(recognizer: TextRecognizer, image: bytes) -> str:
    lines = await recognizer.recognize(image)
    text = "\n".join(lines)
    if not text.strip():
        raise ParsingError("No text recognized in image")
    return text
