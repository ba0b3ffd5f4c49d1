"""Shared schemas for schemaless MongoDB documents."""
from typing import Annotated, Any
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field


def _require_value(value: Any) -> Any:
    # Missing means JSON-falsy: null, "", false, 0 or NaN. Empty lists and objects count as present.
    if value is None or value is False or (isinstance(value, str) and value == ""):
        raise ValueError("value must not be empty")
    if isinstance(value, (int, float)) and (value == 0 or value != value):
        raise ValueError("value must not be empty")
    return value


RequiredValue = Annotated[Any, AfterValidator(_require_value)]

# ObjectId rendered as its hex string
ObjectIdStr = Annotated[str, BeforeValidator(str)]


class DocumentRecord(BaseModel):
    """A stored document: its identity plus every stored field as-is."""
    id: ObjectIdStr = Field(alias="_id")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class InsertResult(BaseModel):
    """Outcome of a single insert."""
    acknowledged: bool
    inserted_id: ObjectIdStr = Field(alias="insertedId")

    model_config = ConfigDict(populate_by_name=True)
