from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class CompanySchema(BaseModel):
    """Company contact details attached to a job posting"""
    name: str = Field(..., min_length=1)
    contactEmail: Optional[str] = None
    contactPhone: Optional[str] = None


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., min_length=1, description="Employment category, e.g. Full-Time")
    description: str = Field(..., min_length=1)
    company: CompanySchema


class CompanyUpdate(BaseModel):
    """Partial company details; supplied keys are merged into the stored company"""
    name: Optional[str] = Field(None, min_length=1)
    contactEmail: Optional[str] = None
    contactPhone: Optional[str] = None

    @field_validator("name")
    @classmethod
    def reject_null_name(cls, v):
        if v is None:
            raise ValueError("company.name cannot be removed")
        return v


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Only fields present in the request body are applied. Required fields may
    be changed but not cleared, so an explicit null is rejected.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    type: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    company: Optional[CompanyUpdate] = None

    @field_validator("title", "type", "description", "company")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be removed")
        return v


class CompanyResponse(BaseModel):
    name: str
    contactEmail: Optional[str] = None
    contactPhone: Optional[str] = None


class JobResponse(BaseModel):
    """Schema for job response"""
    id: UUID
    title: str
    type: str
    description: str
    company: CompanyResponse
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(None, validation_alias="updated_at")

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
