# This project was developed with assistance from AI tools.
"""Question definitions -- one immutable model per question type.

A definition is versioned metadata: where the answer lives in the applicant
data document (``path`` and its type-specific sub-paths), what to show
(localized text), and the type's own constraints. Definitions never hold
answers; ``ApplicantQuestion`` binds one to an applicant's data.
"""

import enum
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from db import DEFAULT_LOCALE, LifecycleStage, Path
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from .options import LocalizedQuestionOption, QuestionOption, localize


class QuestionType(str, enum.Enum):
    ADDRESS = "address"
    CHECKBOX = "checkbox"
    DROPDOWN = "dropdown"
    FILEUPLOAD = "fileupload"
    NAME = "name"
    NUMBER = "number"
    RADIO_BUTTON = "radio_button"
    REPEATER = "repeater"
    TEXT = "text"


class ScalarType(str, enum.Enum):
    """Storage type of one answer leaf."""

    STRING = "string"
    LONG = "long"
    LIST_OF_LONG = "list_of_long"


class QuestionDefinition(BaseModel, ABC):
    """Fields shared by every question type.

    Abstract: only the classes in ``DEFINITION_TYPES`` are instantiated.
    They set ``question_type`` and add their sub-paths and constraints.
    Equality is structural and type-sensitive.
    """

    model_config = ConfigDict(frozen=True)

    question_type: ClassVar[QuestionType]

    id: int
    name: str
    path: Path
    repeater_id: int | None = None
    description: str = ""
    lifecycle_stage: LifecycleStage = LifecycleStage.DRAFT
    question_text: dict[str, str] = Field(default_factory=dict)
    question_help_text: dict[str, str] = Field(default_factory=dict)
    required: bool = False

    @field_validator("path", mode="before")
    @classmethod
    def _parse_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Path.create(value)
        return value

    @field_serializer("path")
    def _dump_path(self, path: Path) -> str:
        return str(path)

    @property
    @abstractmethod
    def scalars(self) -> dict[Path, ScalarType]:
        """Answer leaves this question writes, keyed by path."""

    def localized_question_text(self, locale: str) -> str:
        return localize(self.question_text, locale)[1]

    def localized_question_help_text(self, locale: str) -> str:
        """Help text is optional; an empty mapping renders as ``""``."""
        if not self.question_help_text:
            return ""
        return localize(self.question_help_text, locale)[1]

    def validate_definition(self) -> frozenset[str]:
        """Problems with the definition itself, for authoring screens."""
        problems = set()
        if not self.name.strip():
            problems.add("Name cannot be blank")
        if self.path.is_empty:
            problems.add("Path cannot be empty")
        if DEFAULT_LOCALE not in self.question_text:
            problems.add(f"Question text is missing the default locale '{DEFAULT_LOCALE}'")
        return frozenset(problems)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form, tagged with ``question_type`` for round-tripping."""
        return {"question_type": self.question_type.value, **self.model_dump(mode="json")}


class AddressQuestionDefinition(QuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.ADDRESS

    @property
    def street_path(self) -> Path:
        return self.path.join("street")

    @property
    def city_path(self) -> Path:
        return self.path.join("city")

    @property
    def state_path(self) -> Path:
        return self.path.join("state")

    @property
    def zip_path(self) -> Path:
        return self.path.join("zip")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {
            self.street_path: ScalarType.STRING,
            self.city_path: ScalarType.STRING,
            self.state_path: ScalarType.STRING,
            self.zip_path: ScalarType.STRING,
        }


class NameQuestionDefinition(QuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.NAME

    @property
    def first_name_path(self) -> Path:
        return self.path.join("first")

    @property
    def middle_name_path(self) -> Path:
        return self.path.join("middle")

    @property
    def last_name_path(self) -> Path:
        return self.path.join("last")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {
            self.first_name_path: ScalarType.STRING,
            self.middle_name_path: ScalarType.STRING,
            self.last_name_path: ScalarType.STRING,
        }


class NumberQuestionDefinition(QuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.NUMBER

    min: int | None = None
    max: int | None = None

    @property
    def number_path(self) -> Path:
        return self.path.join("number")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {self.number_path: ScalarType.LONG}

    def validate_definition(self) -> frozenset[str]:
        problems = set(super().validate_definition())
        if self.min is not None and self.max is not None and self.min > self.max:
            problems.add("Minimum value cannot exceed maximum value")
        return frozenset(problems)


class TextQuestionDefinition(QuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.TEXT

    min_length: int | None = Field(default=None, ge=0)
    max_length: int | None = Field(default=None, ge=0)

    @property
    def text_path(self) -> Path:
        return self.path.join("text")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {self.text_path: ScalarType.STRING}

    def validate_definition(self) -> frozenset[str]:
        problems = set(super().validate_definition())
        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            problems.add("Minimum length cannot exceed maximum length")
        return frozenset(problems)


class FileUploadQuestionDefinition(QuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.FILEUPLOAD

    @property
    def file_key_path(self) -> Path:
        return self.path.join("file_key")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {self.file_key_path: ScalarType.STRING}


class MultiOptionQuestionDefinition(QuestionDefinition):
    """Base for question types whose answer is one or more option ids."""

    options: tuple[QuestionOption, ...] = ()

    @property
    def selection_path(self) -> Path:
        return self.path.join("selection")

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {self.selection_path: ScalarType.LONG}

    def get_option(self, option_id: int) -> QuestionOption | None:
        return next((o for o in self.options if o.id == option_id), None)

    def get_options_for_locale(self, locale: str) -> list[LocalizedQuestionOption]:
        """Options in definition order, each resolved to ``locale`` or the default."""
        return [option.localize(locale) for option in self.options]

    def validate_definition(self) -> frozenset[str]:
        problems = set(super().validate_definition())
        if not self.options:
            problems.add("Multi-option questions need at least one option")
        ids = [option.id for option in self.options]
        if len(ids) != len(set(ids)):
            problems.add("Option ids must be unique")
        return frozenset(problems)


class DropdownQuestionDefinition(MultiOptionQuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.DROPDOWN


class RadioButtonQuestionDefinition(MultiOptionQuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.RADIO_BUTTON


class CheckboxQuestionDefinition(MultiOptionQuestionDefinition):
    question_type: ClassVar[QuestionType] = QuestionType.CHECKBOX

    min_choices_required: int | None = Field(default=None, ge=0)
    max_choices_allowed: int | None = Field(default=None, ge=0)

    @property
    def scalars(self) -> dict[Path, ScalarType]:
        return {self.selection_path: ScalarType.LIST_OF_LONG}

    def validate_definition(self) -> frozenset[str]:
        problems = set(super().validate_definition())
        if (
            self.min_choices_required is not None
            and self.max_choices_allowed is not None
            and self.min_choices_required > self.max_choices_allowed
        ):
            problems.add("Minimum choices cannot exceed maximum choices")
        if self.max_choices_allowed is not None and self.max_choices_allowed > len(self.options):
            problems.add("Maximum choices cannot exceed the number of options")
        return frozenset(problems)


# REPEATER has no concrete definition yet.
DEFINITION_TYPES: dict[QuestionType, type[QuestionDefinition]] = {
    cls.question_type: cls
    for cls in (
        AddressQuestionDefinition,
        CheckboxQuestionDefinition,
        DropdownQuestionDefinition,
        FileUploadQuestionDefinition,
        NameQuestionDefinition,
        NumberQuestionDefinition,
        RadioButtonQuestionDefinition,
        TextQuestionDefinition,
    )
}
