# This project was developed with assistance from AI tools.
"""Program schemas served to the rendering layer."""

from datetime import datetime

from db.enums import LifecycleStage
from pydantic import BaseModel, ConfigDict


class ProgramDefinition(BaseModel):
    """Read-only view of a program row."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    description: str | None = None
    lifecycle_stage: LifecycleStage
    created_at: datetime | None = None
