# This project was developed with assistance from AI tools.
"""
Benefits platform -- domain models

Accounts, applicants and their answer documents, programs, applications,
and trusted intermediary groups.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import relationship

from .applicant_data import ApplicantData
from .database import Base
from .enums import LifecycleStage


class TrustedIntermediaryGroup(Base):
    """Accounts authorized to act on behalf of applicants."""

    __tablename__ = "trusted_intermediary_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    members = relationship("Account", back_populates="member_of_group")

    def __repr__(self):
        return f"<TrustedIntermediaryGroup(id={self.id}, name='{self.name}')>"


class Account(Base):
    """Authenticated identity that may own several applicants."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email_address = Column(String(255), unique=True, nullable=True, index=True)
    member_of_group_id = Column(
        Integer, ForeignKey("trusted_intermediary_groups.id", ondelete="SET NULL"), nullable=True, index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    applicants = relationship("Applicant", back_populates="account")
    member_of_group = relationship("TrustedIntermediaryGroup", back_populates="members")

    def __repr__(self):
        return f"<Account(id={self.id}, email='{self.email_address}')>"


class Applicant(Base):
    """Applicant profile; answers are stored as a serialized document in ``object``."""

    __tablename__ = "applicants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_id = Column(
        Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True, index=True,
    )
    object = Column(Text, nullable=False, default="{}")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    account = relationship("Account", back_populates="applicants")
    applications = relationship(
        "Application", back_populates="applicant", cascade="all, delete-orphan",
    )

    @property
    def applicant_data(self) -> ApplicantData:
        """Answer document, deserialized from ``object`` on first access.

        Rows loaded by the ORM skip ``__init__``, so the cache lives in the
        instance dict rather than a constructor-assigned attribute.
        """
        data = self.__dict__.get("_applicant_data")
        if data is None:
            data = ApplicantData.deserialize(self.object)
            self.__dict__["_applicant_data"] = data
        return data

    def sync_applicant_data(self) -> None:
        """Write the cached document back to ``object`` before a flush."""
        data = self.__dict__.get("_applicant_data")
        if data is not None:
            self.object = data.serialize()

    def __repr__(self):
        return f"<Applicant(id={self.id}, account_id={self.account_id})>"


class Program(Base):
    """Benefits program applicants can apply to."""

    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    lifecycle_stage = Column(
        Enum(LifecycleStage, name="lifecycle_stage", native_enum=False),
        nullable=False,
        default=LifecycleStage.DRAFT,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    applications = relationship("Application", back_populates="program")

    def __repr__(self):
        return f"<Program(id={self.id}, name='{self.name}', stage='{self.lifecycle_stage}')>"


class Application(Base):
    """An applicant's application to a program, with a snapshot of answers."""

    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, autoincrement=True)
    applicant_id = Column(
        Integer, ForeignKey("applicants.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    program_id = Column(
        Integer, ForeignKey("programs.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    lifecycle_stage = Column(
        Enum(LifecycleStage, name="lifecycle_stage", native_enum=False),
        nullable=False,
        default=LifecycleStage.DRAFT,
    )
    object = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    applicant = relationship("Applicant", back_populates="applications")
    program = relationship("Program", back_populates="applications")

    def __repr__(self):
        return f"<Application(id={self.id}, stage='{self.lifecycle_stage}')>"
