import logging

from elasticsearch import AsyncElasticsearch, ApiError, TransportError

from app.config import settings

logger = logging.getLogger("app")


def get_client(url: str | None = None) -> AsyncElasticsearch:
    return AsyncElasticsearch(
        url or settings.elasticsearch_url,
        request_timeout=settings.request_timeout,
    )


async def check_connection(client: AsyncElasticsearch) -> bool:
    try:
        info = await client.info()
    except (ApiError, TransportError) as exc:
        logger.error("Could not reach Elasticsearch at %s: %s", settings.elasticsearch_url, exc)
        return False
    logger.info(
        "Connected to Elasticsearch cluster %s (version %s)",
        info["cluster_name"],
        info["version"]["number"],
    )
    return True
