"""
Standard API Response Models

The admin UI reads ``message`` from every mutating response and shows it
verbatim, so all write endpoints share these shapes.
"""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Confirmation for update, delete and check-in calls"""

    message: str = Field(description="Human-readable confirmation")

    class Config:
        json_schema_extra = {"example": {"message": "Staff member 3 updated successfully."}}


class CreatedResponse(MessageResponse):
    """Confirmation for create calls, carrying the store-generated id"""

    id: int = Field(description="Identifier of the created record")

    class Config:
        json_schema_extra = {
            "example": {"id": 12, "message": "Route Campus Loop created successfully."}
        }
