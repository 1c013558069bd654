"""
Pydantic schemas for API request/response models.
"""

from typing import Optional
from pydantic import BaseModel, StrictInt, StrictStr

from diffing.exceptions import PayloadError
from diffing.models import ChangeRecord


class DiffRequest(BaseModel):
    """Schema for a diff request; fields are not coerced from other JSON types."""
    text: Optional[StrictStr] = None
    version: StrictInt = 0

    def validate_payload(self) -> None:
        """
        Check required fields.

        Raises:
            PayloadError: version is missing or not positive, or text is missing
        """
        if self.version <= 0:
            raise PayloadError("Version must be provided and should be positive integer")

        if self.text is None:
            raise PayloadError("missing text in payload")


class ChangeRecordResponse(BaseModel):
    """Schema for one delta entry."""
    OldValue: str = ""
    NewValue: str = ""
    Index: int
    Type: str

    @classmethod
    def from_record(cls, record: ChangeRecord) -> "ChangeRecordResponse":
        return cls(**record.to_dict())


class DiffResponse(BaseModel):
    """Schema for a successful diff response."""
    delta: list[ChangeRecordResponse]
    current_version: int
    updated_version: int


class ErrorResponse(BaseModel):
    """Schema for error responses."""
    Message: str
    Code: int
