# This project was developed with assistance from AI tools.
"""Pydantic schemas shared with upstream collaborators."""

from .program import ProgramDefinition

__all__ = ["ProgramDefinition"]
