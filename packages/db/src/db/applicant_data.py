# This project was developed with assistance from AI tools.
"""Semi-structured applicant answer document.

Answers live in a JSON-like tree of dicts, lists, and scalars addressed by
``Path``. Reads are total: a missing path or a value that does not coerce to
the requested type yields ``None``, which callers treat as "not yet
answered". Writes create intermediate objects as needed.
"""

import copy
import json
import logging
from datetime import UTC, date, datetime
from typing import Any

from .path import Path

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"
PREFERRED_LOCALE_PATH = Path.create("applicant.preferred_locale")


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and not value)


def _coerce_long(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _coerce_double(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _merge_into(destination: dict, source: dict) -> None:
    """Copy leaves of ``source`` into ``destination`` where it has nothing."""
    for key, incoming in source.items():
        existing = destination.get(key)
        if isinstance(existing, dict) and isinstance(incoming, dict):
            _merge_into(existing, incoming)
        elif _is_empty(existing):
            destination[key] = copy.deepcopy(incoming)


class ApplicantData:
    """Mutable answer tree for one applicant.

    Not thread-safe; concurrent readers of an unmutated instance are fine.
    """

    def __init__(self, tree: dict[str, Any] | None = None):
        self._root: dict[str, Any] = tree if tree is not None else {}

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @classmethod
    def deserialize(cls, blob: str | None) -> "ApplicantData":
        """Rebuild a document from its stored JSON form.

        Raises:
            ValueError: The blob is not a JSON object.
        """
        if not blob:
            return cls()
        try:
            tree = json.loads(blob)
        except json.JSONDecodeError:
            logger.warning("Stored applicant data is not valid JSON (%d chars)", len(blob))
            raise
        if not isinstance(tree, dict):
            logger.warning("Stored applicant data is a %s, expected an object", type(tree).__name__)
            raise ValueError("Applicant data must be a JSON object")
        return cls(tree)

    def serialize(self) -> str:
        return json.dumps(self._root, sort_keys=True)

    def as_dict(self) -> dict[str, Any]:
        """Deep copy of the underlying tree."""
        return copy.deepcopy(self._root)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def put_string(self, path: Path, value: str) -> None:
        self._put(path, value)

    def put_long(self, path: Path, value: int) -> None:
        self._put(path, int(value))

    def put_double(self, path: Path, value: float) -> None:
        self._put(path, float(value))

    def put_long_list(self, path: Path, values: list[int]) -> None:
        self._put(path, [int(v) for v in values])

    def _put(self, path: Path, value: Any) -> None:
        if path.is_empty:
            raise ValueError("Cannot overwrite the root of the applicant data")
        node = self._root
        for segment in path.parent().segments:
            child = node.get(segment)
            if not isinstance(child, dict):
                # A scalar in the way is replaced by an object.
                child = {}
                node[segment] = child
            node = child
        node[path.key_name] = value

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _find(self, path: Path) -> Any:
        node: Any = self._root
        for segment in path.segments:
            if not isinstance(node, dict):
                return None
            node = node.get(segment)
            if node is None:
                return None
        return node

    def has_path(self, path: Path) -> bool:
        return self._find(path) is not None

    def get_string(self, path: Path) -> str | None:
        value = self._find(path)
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)):
            return str(value)
        return None

    def get_long(self, path: Path) -> int | None:
        return _coerce_long(self._find(path))

    def get_double(self, path: Path) -> float | None:
        return _coerce_double(self._find(path))

    def get_date(self, path: Path) -> date | None:
        """Read an ISO ``YYYY-MM-DD`` string or epoch milliseconds as a date."""
        value = self._find(path)
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip())
            except ValueError:
                return None
        millis = _coerce_long(value)
        if millis is None:
            return None
        try:
            return datetime.fromtimestamp(millis / 1000, tz=UTC).date()
        except (OverflowError, OSError, ValueError):
            return None

    def get_long_list(self, path: Path) -> list[int] | None:
        value = self._find(path)
        if not isinstance(value, list):
            return None
        longs = [_coerce_long(v) for v in value]
        if any(v is None for v in longs):
            return None
        return longs

    def get_coercible_longs(self, path: Path) -> list[int]:
        """Elements of the list at ``path`` that coerce to longs; others are skipped."""
        value = self._find(path)
        if not isinstance(value, list):
            return []
        return [v for v in map(_coerce_long, value) if v is not None]

    @property
    def preferred_locale(self) -> str:
        return self.get_string(PREFERRED_LOCALE_PATH) or DEFAULT_LOCALE

    @preferred_locale.setter
    def preferred_locale(self, locale: str) -> None:
        self.put_string(PREFERRED_LOCALE_PATH, locale)

    # ------------------------------------------------------------------
    # Merge
    # ------------------------------------------------------------------

    def merge_from(self, other: "ApplicantData") -> None:
        """Deep-merge ``other`` into this document; existing values win.

        A leaf of ``other`` is copied only where this document has no value
        or an empty one (``None``, ``""``, ``[]``, ``{}``). Nested objects are
        merged recursively. Merging the same source twice is a no-op.
        """
        _merge_into(self._root, other._root)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApplicantData):
            return NotImplemented
        return self._root == other._root

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"<ApplicantData({self.serialize()})>"
