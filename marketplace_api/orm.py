# marketplace_api/orm.py
import enum
from datetime import datetime, timezone

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Enum, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class ProfileType(str, enum.Enum):
    client = "client"
    contractor = "contractor"


class ContractStatus(str, enum.Enum):
    new = "new"
    in_progress = "in_progress"
    terminated = "terminated"


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column("firstName", String(255), nullable=False)
    last_name = Column("lastName", String(255), nullable=False)
    profession = Column(String(255), nullable=False)
    balance = Column(Numeric(12, 2), nullable=False, default=0)
    type = Column(Enum(ProfileType, native_enum=False, length=20), nullable=False)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow)
    updated_at = Column("updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Contract(Base):
    __tablename__ = "contracts"

    id = Column(Integer, primary_key=True, index=True)
    terms = Column(Text, nullable=False)
    status = Column(Enum(ContractStatus, native_enum=False, length=20), nullable=False, default=ContractStatus.new)
    client_id = Column("ClientId", Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    contractor_id = Column("ContractorId", Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow)
    updated_at = Column("updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    client = relationship("Profile", foreign_keys=[client_id])
    contractor = relationship("Profile", foreign_keys=[contractor_id])
    jobs = relationship("Job", back_populates="contract")


class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (CheckConstraint("price > 0", name="ck_jobs_price_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    description = Column(Text, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    paid = Column(Boolean, nullable=False, default=False)
    payment_date = Column("paymentDate", DateTime, nullable=True)
    contract_id = Column("ContractId", Integer, ForeignKey("contracts.id"), nullable=False, index=True)
    created_at = Column("createdAt", DateTime, nullable=False, default=utcnow)
    updated_at = Column("updatedAt", DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    contract = relationship("Contract", back_populates="jobs")
