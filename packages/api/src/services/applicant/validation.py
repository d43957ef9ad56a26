# This project was developed with assistance from AI tools.
"""Validation outcomes for applicant answers.

Failing validation is an expected, user-facing state, so outcomes are plain
values collected into sets rather than exceptions.
"""

import enum
from dataclasses import dataclass


class MessageKey(str, enum.Enum):
    """Translation keys for the rendering layer."""

    REQUIRED = "validation.isRequired"
    ADDRESS_STREET_REQUIRED = "validation.streetRequired"
    ADDRESS_CITY_REQUIRED = "validation.cityRequired"
    ADDRESS_STATE_REQUIRED = "validation.stateRequired"
    ADDRESS_ZIP_REQUIRED = "validation.zipcodeRequired"
    ADDRESS_ZIP_INVALID = "validation.invalidZipcode"
    NAME_FIRST_REQUIRED = "validation.firstNameRequired"
    NAME_LAST_REQUIRED = "validation.lastNameRequired"
    NUMBER_MALFORMED = "validation.numberFormatInvalid"
    NUMBER_TOO_SMALL = "validation.numberTooSmall"
    NUMBER_TOO_BIG = "validation.numberTooBig"
    TEXT_TOO_SHORT = "validation.textTooShort"
    TEXT_TOO_LONG = "validation.textTooLong"
    CHECKBOX_TOO_FEW = "validation.tooFewSelections"
    CHECKBOX_TOO_MANY = "validation.tooManySelections"


@dataclass(frozen=True)
class ValidationErrorMessage:
    """One failed rule, with the values the message template needs."""

    key: MessageKey
    args: tuple[int | str, ...] = ()

    @classmethod
    def create(cls, key: MessageKey, *args: int | str) -> "ValidationErrorMessage":
        return cls(key=key, args=args)
