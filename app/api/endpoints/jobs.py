import logging
from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import InvalidIdentifier, JobValidationError
from app.crud import job as job_crud
from app.schemas.job import JobCreateRequest, JobUpdateRequest, JobResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


def _bad_request(e: Exception) -> HTTPException:
    return HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[JobResponse])
def list_jobs(db: Session = Depends(get_db)):
    """
    List all jobs in the order they were created.
    """
    return job_crud.get_multi(db)


@router.post("", status_code=201, response_model=JobResponse)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new job posting.

    title, type, description and company.name are required; a request
    missing any of them is rejected with 400.
    """
    try:
        new_job = job_crud.create(db, request)
    except JobValidationError as e:
        raise _bad_request(e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail="Failed to create job")

    logger.info(f"Created job: {new_job.title}", extra={"job_id": new_job.id})
    return new_job


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: str, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    Returns 400 for a malformed ID and 404 when no job has that ID.
    """
    try:
        job = job_crud.get_by_id(db, job_id)
    except InvalidIdentifier as e:
        raise _bad_request(e)

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job


@router.put("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Partially update a job.

    Only the fields present in the body change; a nested company object is
    merged into the stored one.
    """
    try:
        job = job_crud.update(db, job_id, request)
    except (InvalidIdentifier, JobValidationError) as e:
        raise _bad_request(e)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating job: {e}", extra={"job_id": job_id})
        raise HTTPException(status_code=500, detail="Failed to update job")

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    logger.info("Updated job", extra={"job_id": job.id})
    return job


@router.delete("/{job_id}", status_code=204)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    """
    Delete a job by ID.

    Deleting an ID that matches nothing still returns 204.
    """
    try:
        deleted = job_crud.delete(db, job_id)
    except InvalidIdentifier as e:
        raise _bad_request(e)

    if deleted:
        logger.info("Deleted job", extra={"job_id": job_id})
    else:
        logger.info("Delete requested for unknown job", extra={"job_id": job_id})
    return None
