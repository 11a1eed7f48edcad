"""
Pydantic models shared by the store and the API router.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Square(BaseModel):
    """One grid cell: identifier, Tailwind color class and spiral coordinates."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    color: str
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class Health(BaseModel):
    status: str = "ok"
