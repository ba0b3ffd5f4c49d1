"""Job application Pydantic schemas."""
from pydantic import BaseModel, ConfigDict

from job_portal.schemas.common import DocumentRecord, RequiredValue


class ApplicationCreate(BaseModel):
    """Schema for submitting an application. job_id is not checked against jobs."""
    job_id: RequiredValue
    applicant_email: RequiredValue

    model_config = ConfigDict(extra="allow")


class ApplicationRecord(DocumentRecord):
    """Schema for a stored application."""
