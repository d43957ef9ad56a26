# This project was developed with assistance from AI tools.
"""Build question definitions from a type tag and field values.

Unsupported types fail here, at build time, so nothing downstream ever
holds a definition it cannot dispatch.
"""

import logging
from typing import Any

from db import DEFAULT_LOCALE, LifecycleStage, Path

from .exceptions import UnsupportedQuestionTypeError
from .options import QuestionOption
from .types import DEFINITION_TYPES, QuestionDefinition, QuestionType

logger = logging.getLogger(__name__)


def _resolve_type(question_type: QuestionType | str | None) -> type[QuestionDefinition]:
    # QuestionType members are strs, so lower() normalizes both forms.
    try:
        resolved = QuestionType(question_type.lower())
    except (AttributeError, ValueError) as exc:
        raise UnsupportedQuestionTypeError(question_type) from exc
    definition_cls = DEFINITION_TYPES.get(resolved)
    if definition_cls is None:
        raise UnsupportedQuestionTypeError(resolved.value)
    return definition_cls


def build_question_definition(question_type: QuestionType | str | None, **fields: Any) -> QuestionDefinition:
    """Construct the concrete definition for ``question_type``.

    Raises:
        UnsupportedQuestionTypeError: Unknown type name, or a type with no
            implementation (REPEATER).
        pydantic.ValidationError: Field values do not fit the definition.
    """
    return _resolve_type(question_type)(**fields)


def parse_question_definition(data: dict[str, Any]) -> QuestionDefinition:
    """Rebuild a definition from ``QuestionDefinition.to_dict()`` output."""
    fields = dict(data)
    return build_question_definition(fields.pop("question_type", None), **fields)


def sample_question_definition(question_type: QuestionType | str) -> QuestionDefinition:
    """Representative definition of ``question_type`` with placeholder text."""
    definition_cls = _resolve_type(question_type)
    fields: dict[str, Any] = {
        "id": 1,
        "name": "sample question name",
        "path": Path.create("applicant.sample.question"),
        "description": "sample description",
        "lifecycle_stage": LifecycleStage.ACTIVE,
        "question_text": {DEFAULT_LOCALE: "Sample question text?"},
        "question_help_text": {DEFAULT_LOCALE: "Sample help text"},
    }
    if "options" in definition_cls.model_fields:
        fields["options"] = [
            QuestionOption.create(1, {DEFAULT_LOCALE: "Sample option one"}),
            QuestionOption.create(2, {DEFAULT_LOCALE: "Sample option two"}),
        ]
    logger.debug("Built sample %s definition", definition_cls.question_type.value)
    return definition_cls(**fields)
