# This project was developed with assistance from AI tools.
"""Structural address of a value inside an applicant data document."""

from dataclasses import dataclass

_SEPARATOR = "."


@dataclass(frozen=True, order=True)
class Path:
    """Immutable sequence of key segments, e.g. ``applicant.address.city``.

    Equality and ordering compare the segments, so paths sort the way their
    dotted forms would segment by segment.
    """

    segments: tuple[str, ...] = ()

    @classmethod
    def create(cls, dotted: str) -> "Path":
        """Parse a dotted path. Blank segments are dropped."""
        return cls(tuple(s.strip() for s in dotted.split(_SEPARATOR) if s.strip()))

    @classmethod
    def empty(cls) -> "Path":
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def key_name(self) -> str:
        """Last segment, or an empty string for the root path."""
        return self.segments[-1] if self.segments else ""

    def parent(self) -> "Path":
        return Path(self.segments[:-1])

    def join(self, segment: "str | Path") -> "Path":
        """Return a child path; ``segment`` may itself be dotted or a Path."""
        other = segment if isinstance(segment, Path) else Path.create(segment)
        return Path(self.segments + other.segments)

    def __str__(self) -> str:
        return _SEPARATOR.join(self.segments)
