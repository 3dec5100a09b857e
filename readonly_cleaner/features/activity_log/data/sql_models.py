import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import relationship
from readonly_cleaner.core.database.base import Base
from readonly_cleaner.core.common.enums import RunStatus

def utc_now():
    return datetime.now(timezone.utc)

class RunModel(Base):
    __tablename__ = "runs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    root_path = Column(String, nullable=False, index=True)
    status = Column(SQLEnum(RunStatus), nullable=False)

    files_total = Column(Integer, nullable=False, default=0)
    files_succeeded = Column(Integer, nullable=False, default=0)
    files_failed = Column(Integer, nullable=False, default=0)

    error_message = Column(Text, nullable=True)
    started_at = Column(DateTime(timezone=True), default=utc_now)
    finished_at = Column(DateTime(timezone=True), default=utc_now)

    # Only failed files are logged, matching what an operator needs to investigate
    failures = relationship(
        "FailureModel",
        back_populates="run",
        cascade="all, delete-orphan",
        order_by="FailureModel.id"
    )

class FailureModel(Base):
    __tablename__ = "run_failures"

    id = Column(Integer, primary_key=True, autoincrement=True)
    run_id = Column(Uuid(as_uuid=True), ForeignKey("runs.id"), nullable=False, index=True)
    file_path = Column(String, nullable=False)
    reason = Column(Text, nullable=False)

    run = relationship("RunModel", back_populates="failures")
