"""
Job applications API endpoints.
"""
import logging
from typing import Any, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from job_portal.config import settings
from job_portal.database import Database, get_database
from job_portal.schemas.application import ApplicationCreate, ApplicationRecord
from job_portal.schemas.common import InsertResult
from job_portal.services.documents import insert_document, validate_document

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("", response_model=InsertResult, status_code=201)
async def submit_application(
    payload: Any = Body(None),
    db: Database = Depends(get_database)
):
    """
    Submit an application for a job.

    job_id and applicant_email must be present. job_id is stored as given,
    without checking that the posting exists.
    """
    application = validate_document(ApplicationCreate, payload, "Missing required application fields")

    result = await insert_document(db.job_applications, payload)

    logger.info(f"Application {result.inserted_id} from {application.applicant_email} for job {application.job_id}")

    return result


@router.get("", response_model=List[ApplicationRecord])
async def list_applications(
    email: Optional[str] = Query(None, description="Only applications from this applicant (exact match)"),
    db: Database = Depends(get_database)
):
    """
    List applications, optionally filtered by applicant email.

    Unlike the jobs list, an empty result is a 404.
    """
    if not email and not settings.allow_unfiltered_applications:
        raise HTTPException(status_code=400, detail="email query parameter is required")

    query = {"applicant_email": email} if email else {}

    applications = await db.job_applications.find(query).to_list(length=None)

    if not applications:
        raise HTTPException(status_code=404, detail="No applications found")

    logger.info(f"Listed {len(applications)} applications (email={email})")

    return applications
