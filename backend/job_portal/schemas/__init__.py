"""Request and response schemas"""
from job_portal.schemas.common import DocumentRecord, InsertResult
from job_portal.schemas.job import JobCreate, JobRecord
from job_portal.schemas.application import ApplicationCreate, ApplicationRecord

__all__ = [
    "DocumentRecord",
    "InsertResult",
    "JobCreate",
    "JobRecord",
    "ApplicationCreate",
    "ApplicationRecord",
]
