import logging

from elasticsearch import AsyncElasticsearch, ApiError, NotFoundError, TransportError

from app.exceptions import DecodeError, EngineError, JobNotFoundError
from app.models.job import Job
from app.schemas.search import SearchCriteria
from app.services import query_builder, result_mapper

logger = logging.getLogger(__name__)


def _engine_error(action: str, exc: Exception) -> EngineError:
    status = getattr(exc, "status_code", None) if isinstance(exc, ApiError) else None
    return EngineError(f"Error {action}: {exc}", status_code=status)


class JobSearchGateway:
    """Single point of contact between the API and the job index.

    Every method issues exactly one engine call. Writes ask for an index
    refresh so the change is visible to the very next read.
    """

    def __init__(self, client: AsyncElasticsearch, index_name: str):
        self.client = client
        self.index_name = index_name

    async def create(self, job: Job) -> None:
        logger.info("Indexing job %s (%s)", job.id, job.title)
        try:
            await self.client.index(
                index=self.index_name,
                id=job.id,
                document=job.to_source(),
                refresh=True,
            )
        except (ApiError, TransportError) as exc:
            raise _engine_error("indexing document", exc) from exc

    async def search(self, criteria: SearchCriteria) -> tuple[list[Job], int]:
        query = query_builder.build(criteria)
        logger.info(
            "Searching jobs query=%r location=%r skills=%s",
            criteria.query, criteria.location, criteria.skills,
        )
        try:
            resp = await self.client.search(
                index=self.index_name,
                query=query.to_dict(),
                track_total_hits=True,
            )
        except (ApiError, TransportError) as exc:
            raise _engine_error("executing search", exc) from exc

        try:
            hits = resp["hits"]["hits"]
        except (KeyError, TypeError) as exc:
            raise EngineError("Error parsing search response") from exc
        jobs = result_mapper.decode(hits)
        return jobs, len(jobs)

    async def get_by_id(self, job_id: str) -> Job:
        logger.info("Fetching job %s", job_id)
        try:
            resp = await self.client.get(index=self.index_name, id=job_id)
        except NotFoundError as exc:
            raise JobNotFoundError(job_id) from exc
        except (ApiError, TransportError) as exc:
            raise _engine_error("getting document", exc) from exc

        try:
            return Job.from_source(resp["_source"])
        except (KeyError, DecodeError) as exc:
            raise EngineError(f"Error decoding job {job_id}") from exc

    async def delete(self, job_id: str) -> None:
        logger.info("Deleting job %s", job_id)
        try:
            await self.client.delete(index=self.index_name, id=job_id, refresh=True)
        except NotFoundError as exc:
            raise JobNotFoundError(job_id) from exc
        except (ApiError, TransportError) as exc:
            raise _engine_error("deleting document", exc) from exc
