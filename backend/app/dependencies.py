from fastapi import Request

from app.config import settings
from app.services.search_gateway import JobSearchGateway


def get_gateway(request: Request) -> JobSearchGateway:
    return JobSearchGateway(request.app.state.es, settings.index_name)
