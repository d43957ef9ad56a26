# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .applicant_data import DEFAULT_LOCALE, ApplicantData
from .database import Base, DatabaseService, get_db, get_db_service
from .enums import LifecycleStage
from .models import (
    Account,
    Applicant,
    Application,
    Program,
    TrustedIntermediaryGroup,
)
from .path import Path

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Answer document
    "ApplicantData",
    "DEFAULT_LOCALE",
    "Path",
    # Enums
    "LifecycleStage",
    # Models
    "Account",
    "Applicant",
    "Application",
    "Program",
    "TrustedIntermediaryGroup",
]
