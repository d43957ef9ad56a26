# This project was developed with assistance from AI tools.
"""
Domain enums shared by the SQLAlchemy models (db package) and the
question model and schemas (api package).
"""

import enum


class LifecycleStage(str, enum.Enum):
    """Publication state of a program, question, or application."""

    DRAFT = "draft"
    ACTIVE = "active"
    OBSOLETE = "obsolete"
