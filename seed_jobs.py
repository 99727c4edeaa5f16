"""
Script to reset the jobs collection to the sample postings.

WARNING: This deletes every existing job before inserting the samples.

Run this script from the project root:
    python seed_jobs.py
"""

import logging

from app.core.config import settings
from app.core.database import SessionLocal, init_db
from app.core.logging_config import setup_logging
from app.crud import job as job_crud

logger = logging.getLogger(__name__)

SAMPLE_JOBS = [
    {
        "title": "Web Developer",
        "type": "Full-Time",
        "description": "Build and maintain websites.",
        "company": {
            "name": "WebWorks",
            "contactEmail": "hr@webworks.com",
            "contactPhone": "111222333"
        }
    },
    {
        "title": "Marketing Specialist",
        "type": "Part-Time",
        "description": "Create marketing strategies and campaigns.",
        "company": {
            "name": "AdVision",
            "contactEmail": "jobs@advision.com",
            "contactPhone": "444555666"
        }
    }
]


def seed_jobs():
    """Replace all jobs with SAMPLE_JOBS."""
    init_db()
    db = SessionLocal()

    try:
        deleted = job_crud.delete_all(db)
        logger.info(f"Deleted {deleted} existing jobs")

        created = job_crud.create_many(db, SAMPLE_JOBS)
        for job in created:
            logger.info(f"Seeded job: {job.title} ({job.company['name']})", extra={"job_id": job.id})

        logger.info(f"Seeded {len(created)} jobs into {settings.DATABASE_URL}")

    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, json_logs=settings.JSON_LOGS, service=settings.PROJECT_NAME)
    seed_jobs()
