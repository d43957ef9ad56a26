# This project was developed with assistance from AI tools.
"""Errors raised while building or rendering question definitions."""


class UnsupportedQuestionTypeError(ValueError):
    """Raised when a definition is requested for a type with no implementation."""

    def __init__(self, question_type: object):
        self.question_type = question_type
        super().__init__(f"Unsupported question type: {question_type}")


class TranslationNotFoundError(LookupError):
    """Raised when neither the requested nor the default locale has text."""

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"No translation found for locale '{locale}'")
