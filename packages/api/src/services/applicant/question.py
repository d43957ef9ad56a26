# This project was developed with assistance from AI tools.
"""Binds a question definition to one applicant's data document.

``ApplicantQuestion`` is rebuilt per request and borrows the data document;
it never owns or persists it. ``errors_presenter()`` picks the typed view for
the definition's declared type; the ``create_*`` factories are for callers
that already know the type and raise ``TypeError`` when they are wrong.
"""

from typing import assert_never

from db import ApplicantData, Path

from ..question.exceptions import UnsupportedQuestionTypeError
from ..question.types import QuestionDefinition, QuestionType
from .views import (
    AddressQuestion,
    FileUploadQuestion,
    MultiSelectQuestion,
    NameQuestion,
    NumberQuestion,
    PresentsErrors,
    SingleSelectQuestion,
    TextQuestion,
)


class ApplicantQuestion:
    """A question as seen by a particular applicant."""

    def __init__(self, question_definition: QuestionDefinition, applicant_data: ApplicantData):
        self._question_definition = question_definition
        self._applicant_data = applicant_data

    @property
    def question_definition(self) -> QuestionDefinition:
        return self._question_definition

    @property
    def applicant_data(self) -> ApplicantData:
        return self._applicant_data

    @property
    def question_type(self) -> QuestionType:
        return self._question_definition.question_type

    @property
    def path(self) -> Path:
        return self._question_definition.path

    @property
    def question_text(self) -> str:
        """Question text in the applicant's preferred locale."""
        return self._question_definition.localized_question_text(self._applicant_data.preferred_locale)

    @property
    def question_help_text(self) -> str:
        return self._question_definition.localized_question_help_text(
            self._applicant_data.preferred_locale
        )

    def has_errors(self) -> bool:
        return self.errors_presenter().has_errors()

    def create_address_question(self) -> AddressQuestion:
        return AddressQuestion(self)

    def create_file_upload_question(self) -> FileUploadQuestion:
        return FileUploadQuestion(self)

    def create_multi_select_question(self) -> MultiSelectQuestion:
        return MultiSelectQuestion(self)

    def create_name_question(self) -> NameQuestion:
        return NameQuestion(self)

    def create_number_question(self) -> NumberQuestion:
        return NumberQuestion(self)

    def create_single_select_question(self) -> SingleSelectQuestion:
        return SingleSelectQuestion(self)

    def create_text_question(self) -> TextQuestion:
        return TextQuestion(self)

    def errors_presenter(self) -> PresentsErrors:
        """Typed view for the definition's declared question type.

        Raises:
            UnsupportedQuestionTypeError: The type has no view (REPEATER).
        """
        question_type = self.question_type
        match question_type:
            case QuestionType.ADDRESS:
                return self.create_address_question()
            case QuestionType.CHECKBOX:
                return self.create_multi_select_question()
            case QuestionType.DROPDOWN | QuestionType.RADIO_BUTTON:
                return self.create_single_select_question()
            case QuestionType.FILEUPLOAD:
                return self.create_file_upload_question()
            case QuestionType.NAME:
                return self.create_name_question()
            case QuestionType.NUMBER:
                return self.create_number_question()
            case QuestionType.TEXT:
                return self.create_text_question()
            case QuestionType.REPEATER:
                raise UnsupportedQuestionTypeError(question_type.value)
            case _:
                assert_never(question_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicantQuestion):
            return NotImplemented
        return (
            self._question_definition == other._question_definition
            and self._applicant_data == other._applicant_data
        )

    __hash__ = None  # the data document is mutable

    def __repr__(self) -> str:
        return (
            f"<ApplicantQuestion(id={self._question_definition.id}, "
            f"type='{self.question_type.value}', path='{self.path}')>"
        )
