"""Helpers shared by the document endpoints: presence validation and inserts."""
import logging
from typing import Any, Type, TypeVar

from bson import ObjectId
from fastapi import HTTPException
from pydantic import BaseModel, ValidationError

from job_portal.schemas.common import InsertResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def missing_fields(error: ValidationError) -> list[str]:
    """Top-level field names (by alias) that failed validation."""
    names = []
    for item in error.errors():
        if item["loc"]:
            name = str(item["loc"][0])
            if name not in names:
                names.append(name)
    return names


def validate_document(model: Type[ModelT], payload: Any, message: str) -> ModelT:
    """
    Check a request body against a presence-only schema.

    Args:
        model: Schema declaring the required fields
        payload: Parsed JSON body (None when the request had no body)
        message: Detail prefix used in the 400 response

    Raises:
        HTTPException 400: If the body is not an object or a field is missing
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise HTTPException(status_code=400, detail="Request body must be a JSON object")

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        fields = missing_fields(e)
        logger.warning(f"Rejected {model.__name__}: missing {fields}")
        raise HTTPException(status_code=400, detail=f"{message}: {', '.join(fields)}")


def parse_object_id(value: str, label: str) -> ObjectId:
    """
    Raises:
        HTTPException 400: If value is not a 24-character hex ObjectId
    """
    if not ObjectId.is_valid(value):
        raise HTTPException(status_code=400, detail=f"Invalid {label}: {value}")
    return ObjectId(value)


async def insert_document(collection, document: dict[str, Any]) -> InsertResult:
    """Insert the document as received and report the new identity."""
    result = await collection.insert_one(dict(document))
    return InsertResult(acknowledged=result.acknowledged, inserted_id=result.inserted_id)
