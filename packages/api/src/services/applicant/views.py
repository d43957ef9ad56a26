# This project was developed with assistance from AI tools.
"""Typed views over one applicant question.

Each view reads the answer for its question type out of the applicant data
document and reports two kinds of errors:

- question errors, common to every type (a required question left blank);
- type-specific errors, about the shape of an answer that is present
  (an address without a city, a number out of bounds).

Nothing here raises for a missing or malformed answer; accessors return
``None`` (or an empty set) and errors are returned as values.
"""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import TYPE_CHECKING, ClassVar

from ..question.options import LocalizedQuestionOption
from ..question.types import (
    AddressQuestionDefinition,
    CheckboxQuestionDefinition,
    DropdownQuestionDefinition,
    FileUploadQuestionDefinition,
    NameQuestionDefinition,
    NumberQuestionDefinition,
    QuestionDefinition,
    RadioButtonQuestionDefinition,
    TextQuestionDefinition,
)
from .validation import MessageKey, ValidationErrorMessage

if TYPE_CHECKING:
    from .question import ApplicantQuestion

logger = logging.getLogger(__name__)

_ZIP_PATTERN = re.compile(r"\d{5}(-\d{4})?")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class PresentsErrors(ABC):
    """Base for typed question views.

    Subclasses name the definition types they accept; binding any other
    definition is a programming error and raises ``TypeError``.
    """

    definition_types: ClassVar[tuple[type[QuestionDefinition], ...]]

    def __init__(self, applicant_question: "ApplicantQuestion"):
        definition = applicant_question.question_definition
        if not isinstance(definition, self.definition_types):
            raise TypeError(
                f"{type(self).__name__} cannot present a "
                f"{definition.question_type.value} question (id={definition.id})"
            )
        self._applicant_question = applicant_question
        self._data = applicant_question.applicant_data

    @property
    def applicant_question(self) -> "ApplicantQuestion":
        return self._applicant_question

    @abstractmethod
    def is_answered(self) -> bool:
        """True once the applicant has stored a usable answer."""

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        return iter(())

    def get_question_errors(self) -> frozenset[ValidationErrorMessage]:
        if self._applicant_question.question_definition.required and not self.is_answered():
            return frozenset({ValidationErrorMessage.create(MessageKey.REQUIRED)})
        return frozenset()

    def get_type_specific_errors(self) -> frozenset[ValidationErrorMessage]:
        return frozenset(self._type_specific_errors())

    def has_question_errors(self) -> bool:
        return bool(self.get_question_errors())

    def has_type_specific_errors(self) -> bool:
        return bool(self.get_type_specific_errors())

    def has_errors(self) -> bool:
        return self.has_question_errors() or self.has_type_specific_errors()


class AddressQuestion(PresentsErrors):
    definition_types = (AddressQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: AddressQuestionDefinition = applicant_question.question_definition

    def get_street_value(self) -> str | None:
        return self._data.get_string(self._definition.street_path)

    def get_city_value(self) -> str | None:
        return self._data.get_string(self._definition.city_path)

    def get_state_value(self) -> str | None:
        return self._data.get_string(self._definition.state_path)

    def get_zip_value(self) -> str | None:
        return self._data.get_string(self._definition.zip_path)

    def is_answered(self) -> bool:
        return any(self._data.has_path(path) for path in self._definition.scalars)

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        if not self.is_answered():
            return
        if _is_blank(self.get_street_value()):
            yield ValidationErrorMessage.create(MessageKey.ADDRESS_STREET_REQUIRED)
        if _is_blank(self.get_city_value()):
            yield ValidationErrorMessage.create(MessageKey.ADDRESS_CITY_REQUIRED)
        if _is_blank(self.get_state_value()):
            yield ValidationErrorMessage.create(MessageKey.ADDRESS_STATE_REQUIRED)
        zip_code = self.get_zip_value()
        if _is_blank(zip_code):
            yield ValidationErrorMessage.create(MessageKey.ADDRESS_ZIP_REQUIRED)
        elif not _ZIP_PATTERN.fullmatch(zip_code.strip()):
            yield ValidationErrorMessage.create(MessageKey.ADDRESS_ZIP_INVALID)


class NameQuestion(PresentsErrors):
    definition_types = (NameQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: NameQuestionDefinition = applicant_question.question_definition

    def get_first_name_value(self) -> str | None:
        return self._data.get_string(self._definition.first_name_path)

    def get_middle_name_value(self) -> str | None:
        return self._data.get_string(self._definition.middle_name_path)

    def get_last_name_value(self) -> str | None:
        return self._data.get_string(self._definition.last_name_path)

    def is_answered(self) -> bool:
        return any(self._data.has_path(path) for path in self._definition.scalars)

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        if not self.is_answered():
            return
        if _is_blank(self.get_first_name_value()):
            yield ValidationErrorMessage.create(MessageKey.NAME_FIRST_REQUIRED)
        if _is_blank(self.get_last_name_value()):
            yield ValidationErrorMessage.create(MessageKey.NAME_LAST_REQUIRED)


class NumberQuestion(PresentsErrors):
    definition_types = (NumberQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: NumberQuestionDefinition = applicant_question.question_definition

    def get_number_value(self) -> int | None:
        return self._data.get_long(self._definition.number_path)

    def is_answered(self) -> bool:
        return self.get_number_value() is not None

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        if not self._data.has_path(self._definition.number_path):
            return
        value = self.get_number_value()
        if value is None:
            # Something is stored, but it is not a whole number.
            yield ValidationErrorMessage.create(MessageKey.NUMBER_MALFORMED)
            return
        if self._definition.min is not None and value < self._definition.min:
            yield ValidationErrorMessage.create(MessageKey.NUMBER_TOO_SMALL, self._definition.min)
        if self._definition.max is not None and value > self._definition.max:
            yield ValidationErrorMessage.create(MessageKey.NUMBER_TOO_BIG, self._definition.max)


class TextQuestion(PresentsErrors):
    definition_types = (TextQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: TextQuestionDefinition = applicant_question.question_definition

    def get_text_value(self) -> str | None:
        return self._data.get_string(self._definition.text_path)

    def is_answered(self) -> bool:
        return not _is_blank(self.get_text_value())

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        if not self.is_answered():
            return
        text = self.get_text_value()
        if self._definition.min_length is not None and len(text) < self._definition.min_length:
            yield ValidationErrorMessage.create(MessageKey.TEXT_TOO_SHORT, self._definition.min_length)
        if self._definition.max_length is not None and len(text) > self._definition.max_length:
            yield ValidationErrorMessage.create(MessageKey.TEXT_TOO_LONG, self._definition.max_length)


class FileUploadQuestion(PresentsErrors):
    definition_types = (FileUploadQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: FileUploadQuestionDefinition = applicant_question.question_definition

    def get_file_key_value(self) -> str | None:
        return self._data.get_string(self._definition.file_key_path)

    def is_answered(self) -> bool:
        return not _is_blank(self.get_file_key_value())


class SingleSelectQuestion(PresentsErrors):
    """Dropdown and radio button questions: at most one option id stored."""

    definition_types = (DropdownQuestionDefinition, RadioButtonQuestionDefinition)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: DropdownQuestionDefinition | RadioButtonQuestionDefinition = (
            applicant_question.question_definition
        )

    def get_options(self) -> frozenset[LocalizedQuestionOption]:
        return frozenset(self._definition.get_options_for_locale(self._data.preferred_locale))

    def get_selected_option_id(self) -> int | None:
        return self._data.get_long(self._definition.selection_path)

    def get_selected_option_value(self) -> LocalizedQuestionOption | None:
        """The stored selection in the applicant's locale.

        A stored id that no longer matches any option (the option was removed
        after the answer was recorded) reads as no selection.
        """
        option_id = self.get_selected_option_id()
        if option_id is None:
            return None
        option = self._definition.get_option(option_id)
        if option is None:
            logger.info(
                "Question %s has stored option %s that no longer exists",
                self._definition.id,
                option_id,
            )
            return None
        return option.localize(self._data.preferred_locale)

    def is_answered(self) -> bool:
        return self.get_selected_option_value() is not None


class MultiSelectQuestion(PresentsErrors):
    """Checkbox questions: a list of option ids stored."""

    definition_types = (CheckboxQuestionDefinition,)

    def __init__(self, applicant_question: "ApplicantQuestion"):
        super().__init__(applicant_question)
        self._definition: CheckboxQuestionDefinition = applicant_question.question_definition

    def get_options(self) -> frozenset[LocalizedQuestionOption]:
        return frozenset(self._definition.get_options_for_locale(self._data.preferred_locale))

    def get_selected_options_value(self) -> frozenset[LocalizedQuestionOption]:
        """Selected options in the applicant's locale.

        Ids that do not parse or match no current option are dropped one by one.
        """
        selected_ids = self._data.get_coercible_longs(self._definition.selection_path)
        locale = self._data.preferred_locale
        resolved = set()
        for option_id in selected_ids:
            option = self._definition.get_option(option_id)
            if option is not None:
                resolved.add(option.localize(locale))
        return frozenset(resolved)

    def is_answered(self) -> bool:
        return bool(self.get_selected_options_value())

    def _type_specific_errors(self) -> Iterator[ValidationErrorMessage]:
        if not self.is_answered():
            return
        count = len(self.get_selected_options_value())
        minimum = self._definition.min_choices_required
        maximum = self._definition.max_choices_allowed
        if minimum is not None and count < minimum:
            yield ValidationErrorMessage.create(MessageKey.CHECKBOX_TOO_FEW, minimum)
        if maximum is not None and count > maximum:
            yield ValidationErrorMessage.create(MessageKey.CHECKBOX_TOO_MANY, maximum)
