from datetime import datetime

from pydantic import BaseModel, Field


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    company: str = ""
    location: str = ""
    skills: list[str] = []
    salary: float = Field(0.0, ge=0)


class JobResponse(BaseModel):
    id: str
    title: str
    description: str
    company: str
    location: str
    skills: list[str]
    salary: float
    created_at: datetime
    score: float = 0.0


class JobCreateResponse(BaseModel):
    id: str
    message: str


class JobDeleteResponse(BaseModel):
    message: str
