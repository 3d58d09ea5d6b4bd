from datetime import datetime

from pydantic import BaseModel, Field, ValidationError

from app.exceptions import DecodeError


class Job(BaseModel):
    id: str
    title: str
    description: str = ""
    company: str = ""
    location: str = ""
    skills: list[str] = Field(default_factory=list)
    salary: float = Field(default=0.0, ge=0)
    created_at: datetime
    # Relevance from one search response only; never stored.
    score: float = 0.0

    def to_source(self) -> dict:
        """Return the body stored in the index for this job."""
        return self.model_dump(mode="json", exclude={"score"})

    @classmethod
    def from_source(cls, source: dict, score: float | None = None) -> "Job":
        if not isinstance(source, dict):
            raise DecodeError("Stored document is not an object")
        data = {k: v for k, v in source.items() if k != "score"}
        try:
            return cls(**data, score=score or 0.0)
        except ValidationError as exc:
            raise DecodeError(f"Invalid stored document: {exc.error_count()} field error(s)") from exc
