"""
Jobs API endpoints.
Handles creating and reading job postings.
"""
import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from job_portal.database import Database, get_database
from job_portal.schemas.common import InsertResult
from job_portal.schemas.job import JobCreate, JobRecord
from job_portal.services.documents import insert_document, parse_object_id, validate_document

# Configure logger
logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[JobRecord])
async def list_jobs(
    email: Optional[str] = Query(None, description="Only postings owned by this HR email (exact match)"),
    db: Database = Depends(get_database)
):
    """
    List job postings, optionally filtered by HR owner email.
    An empty result is a normal empty list.
    """
    query = {"hr_email": email} if email else {}

    jobs = await db.jobs.find(query).to_list(length=None)

    logger.info(f"Listed {len(jobs)} jobs (email={email})")

    return jobs


@router.post("", response_model=InsertResult, status_code=201)
async def create_job(
    payload: Any = Body(None),
    db: Database = Depends(get_database)
):
    """
    Create a job posting.

    title, company, location and salaryRange must be present; every other
    field in the body is stored unchanged.
    """
    job = validate_document(JobCreate, payload, "Missing required fields")

    result = await insert_document(db.jobs, payload)

    logger.info(f"Created job {result.inserted_id}: {job.title} at {job.company} (hr_email={payload.get('hr_email')})")

    return result


@router.get("/{job_id}", response_model=JobRecord)
async def get_job(
    job_id: str,
    db: Database = Depends(get_database)
):
    """
    Get a specific job posting by ID.
    """
    object_id = parse_object_id(job_id, "job id")

    job = await db.jobs.find_one({"_id": object_id})

    if not job:
        raise HTTPException(status_code=404, detail="Job not found")

    return job
