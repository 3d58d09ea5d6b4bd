from fastapi import APIRouter, Depends, Query

from app.dependencies import get_gateway
from app.routers.jobs import job_to_response
from app.schemas.search import SearchCriteria, SearchResponse
from app.services.search_gateway import JobSearchGateway

router = APIRouter(prefix="/search", tags=["search"])


def split_skills(values: list[str]) -> list[str]:
    # Accept both ?skills=go&skills=sql and ?skills=go,sql
    return [part.strip() for value in values for part in value.split(",") if part.strip()]


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query(""),
    location: str = Query(""),
    skills: list[str] = Query([]),
    gateway: JobSearchGateway = Depends(get_gateway),
):
    criteria = SearchCriteria(query=q, location=location, skills=split_skills(skills))
    jobs, total = await gateway.search(criteria)
    return SearchResponse(jobs=[job_to_response(j) for j in jobs], total=total)
