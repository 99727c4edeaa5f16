"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.

Identifier handling has two distinct outcomes:
- A malformed id raises InvalidIdentifier before any query is issued.
- A well-formed id with no matching row returns None (or False on delete).
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Union
from uuid import UUID
from pydantic import ValidationError
from sqlalchemy.orm import Session
from app.core.exceptions import InvalidIdentifier, JobValidationError
from app.models.job import Job
from app.schemas.job import JobCreateRequest, JobUpdateRequest

logger = logging.getLogger(__name__)

JobId = Union[str, UUID]

JOB_ID_PATTERN = re.compile(r"[0-9a-fA-F]{8}-(?:[0-9a-fA-F]{4}-){3}[0-9a-fA-F]{12}")


def parse_job_id(job_id: JobId) -> UUID:
    """
    Check that a job id has the store's identifier syntax.

    Only the canonical hyphenated form is accepted. uuid.UUID on its own
    also takes braces, urn:uuid: prefixes, bare hex and int() quirks such
    as signs or underscores, none of which are ids this store hands out.

    Args:
        job_id: Raw id, usually a path parameter

    Returns:
        The id as a UUID

    Raises:
        InvalidIdentifier: If the id is not a canonical UUID string
    """
    if isinstance(job_id, UUID):
        return job_id
    if not isinstance(job_id, str) or not JOB_ID_PATTERN.fullmatch(job_id):
        logger.warning("Rejected malformed job id", extra={"job_id": str(job_id)})
        raise InvalidIdentifier(job_id)
    return UUID(job_id)


def _validated(schema, job_data):
    if isinstance(job_data, schema):
        return job_data
    try:
        return schema.model_validate(job_data)
    except ValidationError as e:
        raise JobValidationError(f"Invalid job data: {e.error_count()} error(s)", e.errors()) from e


def _build(job_data: JobCreateRequest) -> Job:
    return Job(
        title=job_data.title,
        type=job_data.type,
        description=job_data.description,
        company=job_data.company.model_dump(),
    )


def create(db: Session, job_data: Union[JobCreateRequest, Dict[str, Any]]) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Job creation data, either validated or a raw dict

    Returns:
        Created Job instance with id

    Raises:
        JobValidationError: If a required field is missing or blank
    """
    db_job = _build(_validated(JobCreateRequest, job_data))

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def create_many(db: Session, jobs: Iterable[Union[JobCreateRequest, Dict[str, Any]]]) -> List[Job]:
    """
    Insert several jobs in one transaction, preserving their order.

    Every job is validated before anything is written, so either all of
    them are stored or none are. Each job gets a created_at one microsecond
    after the previous one, so listing returns them in input order even on
    a coarse clock.
    """
    db_jobs = [_build(_validated(JobCreateRequest, data)) for data in jobs]

    batch_start = datetime.now(timezone.utc)
    for position, db_job in enumerate(db_jobs):
        db_job.created_at = batch_start + timedelta(microseconds=position)
        db.add(db_job)

    db.commit()
    for db_job in db_jobs:
        db.refresh(db_job)

    logger.info(f"Inserted {len(db_jobs)} jobs")
    return db_jobs


def get_by_id(db: Session, job_id: JobId) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Args:
        db: Database session
        job_id: Job ID to retrieve

    Returns:
        Job instance if found, None otherwise

    Raises:
        InvalidIdentifier: If job_id is not a valid UUID
    """
    return db.query(Job).filter(Job.id == parse_job_id(job_id)).first()


def get_multi(db: Session) -> List[Job]:
    """
    Retrieve all jobs in insertion order.

    Rows sharing a created_at are ordered by id so the result is stable.
    """
    return db.query(Job).order_by(Job.created_at, Job.id).all()


def update(
    db: Session,
    job_id: JobId,
    job_data: Union[JobUpdateRequest, Dict[str, Any]]
) -> Optional[Job]:
    """
    Apply a partial update to a job.

    Fields absent from job_data keep their stored values. A partial company
    object is merged into the stored company rather than replacing it.

    Args:
        db: Database session
        job_id: Job ID to update
        job_data: Fields to change

    Returns:
        Updated Job instance if found, None otherwise

    Raises:
        InvalidIdentifier: If job_id is not a valid UUID
        JobValidationError: If an update would clear a required field
    """
    job = get_by_id(db, job_id)
    if not job:
        return None

    changes = _validated(JobUpdateRequest, job_data).model_dump(exclude_unset=True)
    company_changes = changes.pop("company", None)

    try:
        for field, value in changes.items():
            setattr(job, field, value)

        if company_changes:
            # Reassign so the JSON column is marked dirty
            job.company = {**job.company, **company_changes}
    except JobValidationError:
        db.rollback()
        raise

    db.commit()
    db.refresh(job)

    return job


def delete(db: Session, job_id: JobId) -> bool:
    """
    Delete a job by ID.

    Args:
        db: Database session
        job_id: Job ID to delete

    Returns:
        True if deleted, False if not found

    Raises:
        InvalidIdentifier: If job_id is not a valid UUID
    """
    job = get_by_id(db, job_id)
    if not job:
        return False

    db.delete(job)
    db.commit()

    return True


def delete_all(db: Session) -> int:
    """
    Delete every job.

    Returns:
        Number of jobs removed
    """
    deleted = db.query(Job).delete()
    db.commit()
    return deleted
