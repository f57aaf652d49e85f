"""Pydantic schemas for customer request bodies.

Only presence is checked; formats are left to the database.
"""

from pydantic import BaseModel, Field


class CustomerCreateSchema(BaseModel):
    """Schema for creating or replacing a customer."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
