"""Job Portal: request/response models."""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    # forwarded to the completion API exactly as received
    messages: List[Any]
    # any value is accepted; unknown codes fall back to English
    language: Any = None


class ChatReply(BaseModel):
    message: str


class ErrorReply(BaseModel):
    error: str


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1)
    company_name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    salary: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    skills_required: List[str] = []
    description: Optional[str] = None

    @field_validator("skills_required", mode="before")
    @classmethod
    def split_skills(cls, value: Union[str, List[str], None]) -> List[str]:
        """Accept "React, Node" as well as ["React", "Node"]; blank entries are dropped."""
        if value is None:
            return []
        if isinstance(value, str):
            value = value.split(",")
        return [str(skill).strip() for skill in value if str(skill).strip()]


class JobListing(BaseModel):
    id: Optional[Union[str, int]] = None
    employer_id: Optional[str] = None
    title: str
    company_name: str
    role: str
    salary: str
    location: str
    skills_required: List[str] = []
    description: Optional[str] = None
    status: str = "active"
    created_at: Optional[str] = None

    @field_validator("skills_required", mode="before")
    @classmethod
    def skills_as_text(cls, value: Optional[List[Any]]) -> List[str]:
        # rows written outside this service may hold null or non-text skills
        return [str(skill) for skill in value or []]


class JobListResponse(BaseModel):
    jobs: List[JobListing]
    total: int


class ProfileResponse(BaseModel):
    user_id: str
    role: Optional[str] = None
    dashboard: Optional[str] = None


class LanguageItem(BaseModel):
    code: str
    label: str
    speech_locale: str


class LanguageListResponse(BaseModel):
    languages: List[LanguageItem]
    default: str


class HealthResponse(BaseModel):
    status: str
    service: str
