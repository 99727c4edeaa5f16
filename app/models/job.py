import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, JSON, Uuid
from sqlalchemy.orm import validates
from app.core.database import Base
from app.core.exceptions import JobValidationError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Job(Base):
    """
    Job model representing a job posting.

    The company contact details are kept as a nested JSON document so a job
    round-trips with the same shape it is posted with.
    """
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)
    description = Column(String, nullable=False)

    # {"name": ..., "contactEmail": ..., "contactPhone": ...}
    company = Column(JSON, nullable=False)

    # Python-side defaults keep microsecond resolution for insertion ordering
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=_utcnow)

    @validates("title", "type", "description")
    def validate_required_text(self, key, value):
        if value is None or not str(value).strip():
            raise JobValidationError(f"Job {key} is required")
        return value

    @validates("company")
    def validate_company(self, key, value):
        if not isinstance(value, dict) or not str(value.get("name") or "").strip():
            raise JobValidationError("Job company.name is required")
        return value

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', type='{self.type}')>"
