import logging
from collections.abc import Iterable

from app.exceptions import DecodeError
from app.models.job import Job

logger = logging.getLogger(__name__)


def decode_hit(hit: dict) -> Job:
    if "_source" not in hit:
        raise DecodeError("Hit has no _source")
    return Job.from_source(hit["_source"], score=hit.get("_score"))


def decode(hits: Iterable[dict]) -> list[Job]:
    """Decode engine hits in order, skipping any that fail to parse."""
    jobs: list[Job] = []
    for hit in hits:
        try:
            jobs.append(decode_hit(hit))
        except DecodeError as exc:
            logger.warning("Skipping hit %s: %s", hit.get("_id"), exc)
    return jobs
