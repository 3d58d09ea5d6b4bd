from pydantic import BaseModel, field_validator

from app.schemas.job import JobResponse


class SearchCriteria(BaseModel):
    query: str = ""
    location: str = ""
    skills: list[str] = []

    @field_validator("query", "location", mode="before")
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v

    @field_validator("skills", mode="before")
    @classmethod
    def wrap_single_skill(cls, v):
        if v is None:
            return []
        return [v] if isinstance(v, str) else v

    @field_validator("skills")
    @classmethod
    def drop_blank_skills(cls, v: list[str]) -> list[str]:
        return [s.strip() for s in v if s.strip()]

    @property
    def is_empty(self) -> bool:
        return not (self.query or self.location or self.skills)


class SearchResponse(BaseModel):
    jobs: list[JobResponse]
    total: int
