"""
Shared base models and response helpers.

JSON payloads use camelCase keys (``isAvailable``, ``createdAt``) while
Python code uses snake_case attributes.  Both spellings are accepted
on input.

Email addresses are lowercased as a whole on input, so uniqueness
checks treat addresses that differ only in case as the same.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict

from fastapi.encoders import jsonable_encoder
from pydantic import AfterValidator, BaseModel, EmailStr
from pydantic.alias_generators import to_camel


Email = Annotated[EmailStr, AfterValidator(str.lower)]


class ApiModel(BaseModel):
    """Base for request payloads."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "str_strip_whitespace": True,
    }


class RecordModel(BaseModel):
    """Base for stored records.

    Records are frozen; the store replaces a record with an updated
    copy instead of mutating it in place.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "from_attributes": True,
    }


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def envelope(message: str, data: Any = None, **extra: Any) -> Dict[str, Any]:
    """Build the success envelope ``{"message": ..., "data": ...}``."""
    body: Dict[str, Any] = {"message": message}
    if data is not None:
        body["data"] = jsonable_encoder(data, by_alias=True)
    body.update(extra)
    return body
