import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.dependencies import get_gateway
from app.models.job import Job
from app.schemas.job import JobCreate, JobCreateResponse, JobDeleteResponse, JobResponse
from app.services.search_gateway import JobSearchGateway

router = APIRouter(prefix="/jobs", tags=["jobs"])


def job_to_response(job: Job) -> JobResponse:
    return JobResponse(**job.model_dump())


@router.post("", response_model=JobCreateResponse, status_code=201)
async def create_job(req: JobCreate, gateway: JobSearchGateway = Depends(get_gateway)):
    job = Job(
        id=str(uuid.uuid4()),
        title=req.title,
        description=req.description,
        company=req.company,
        location=req.location,
        skills=req.skills,
        salary=req.salary,
        created_at=datetime.now(timezone.utc),
    )
    await gateway.create(job)
    return JobCreateResponse(id=job.id, message="Job created successfully")


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: str, gateway: JobSearchGateway = Depends(get_gateway)):
    job = await gateway.get_by_id(job_id)
    return job_to_response(job)


@router.delete("/{job_id}", response_model=JobDeleteResponse)
async def delete_job(job_id: str, gateway: JobSearchGateway = Depends(get_gateway)):
    await gateway.delete(job_id)
    return JobDeleteResponse(message="Job deleted successfully")
