"""DeepL translate response schemas."""

from pydantic import BaseModel, ConfigDict


class Translation(BaseModel):
    """One translated segment."""

    model_config = ConfigDict(extra="ignore")

    detected_source_language: str | None = None
    text: str


class TranslationResult(BaseModel):
    """Body of a successful DeepL /v2/translate call."""

    model_config = ConfigDict(extra="ignore")

    translations: list[Translation] = []

    def joined(self, separator: str = "-") -> str:
        """All translated segments, in order, as one reply string."""
        return separator.join(t.text for t in self.translations)
