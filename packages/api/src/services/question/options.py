# This project was developed with assistance from AI tools.
"""Selectable options for dropdown, radio button, and checkbox questions."""

from dataclasses import dataclass

from db import DEFAULT_LOCALE
from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import TranslationNotFoundError


def localize(texts: dict[str, str], locale: str) -> tuple[str, str]:
    """Return ``(locale, text)`` for ``locale``, falling back to the default locale.

    Raises:
        TranslationNotFoundError: Neither locale has text.
    """
    if locale in texts:
        return locale, texts[locale]
    if DEFAULT_LOCALE in texts:
        return DEFAULT_LOCALE, texts[DEFAULT_LOCALE]
    raise TranslationNotFoundError(locale)


@dataclass(frozen=True)
class LocalizedQuestionOption:
    """An option resolved to a single locale's display text."""

    id: int
    option_text: str
    locale: str


class QuestionOption(BaseModel):
    """Option id plus its display text per locale."""

    model_config = ConfigDict(frozen=True)

    id: int
    option_text: dict[str, str]

    @field_validator("option_text")
    @classmethod
    def _require_default_locale(cls, value: dict[str, str]) -> dict[str, str]:
        if DEFAULT_LOCALE not in value:
            raise ValueError(f"Option text must include the default locale '{DEFAULT_LOCALE}'")
        return value

    @classmethod
    def create(cls, option_id: int, option_text: dict[str, str]) -> "QuestionOption":
        return cls(id=option_id, option_text=option_text)

    def localize(self, locale: str) -> LocalizedQuestionOption:
        """Resolve to ``locale``; the returned locale is the one the text is in."""
        resolved_locale, text = localize(self.option_text, locale)
        return LocalizedQuestionOption(id=self.id, option_text=text, locale=resolved_locale)
