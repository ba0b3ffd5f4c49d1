"""Job-related Pydantic schemas."""
from pydantic import BaseModel, ConfigDict, Field

from job_portal.schemas.common import DocumentRecord, RequiredValue


class JobCreate(BaseModel):
    """Schema for a new job posting. Unknown fields are kept."""
    title: RequiredValue
    company: RequiredValue
    location: RequiredValue
    salary_range: RequiredValue = Field(alias="salaryRange")  # text or {"min", "max", ...}

    model_config = ConfigDict(extra="allow")


class JobRecord(DocumentRecord):
    """Schema for a stored job posting."""
