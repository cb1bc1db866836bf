"""Supported languages for the translator."""

from enum import Enum


class Language(Enum):
    """One of the two languages a request can be made in."""

    ENGLISH = "en"
    RUSSIAN = "ru"

    @property
    def label(self) -> str:
        """Human-readable name shown next to the text fields."""
        return "English" if self is Language.ENGLISH else "Русский"

    @classmethod
    def from_tag(cls, tag: str) -> "Language":
        """Look up a language by its tag ("en" or "ru")."""
        return cls(tag.strip().lower())
