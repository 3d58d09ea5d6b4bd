import asyncio
from unittest.mock import AsyncMock, patch

from elasticsearch import ConnectionError as ESConnectionError

from app.config import Settings, settings
from app.elastic import check_connection, get_client


def test_check_connection_ok():
    es = AsyncMock()
    es.info.return_value = {"cluster_name": "test", "version": {"number": "8.13.0"}}
    assert asyncio.run(check_connection(es)) is True


def test_check_connection_unreachable():
    es = AsyncMock()
    es.info.side_effect = ESConnectionError("connection refused")
    assert asyncio.run(check_connection(es)) is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("JOBSEARCH_INDEX_NAME", "jobs-staging")
    monkeypatch.setenv("JOBSEARCH_REQUEST_TIMEOUT", "2.5")
    s = Settings()
    assert s.index_name == "jobs-staging"
    assert s.request_timeout == 2.5
    assert s.elasticsearch_url == "http://localhost:9200"


def test_get_client_bounds_every_request():
    with patch("app.elastic.AsyncElasticsearch") as es_cls:
        get_client("http://es.internal:9200")
    es_cls.assert_called_once_with(
        "http://es.internal:9200",
        request_timeout=settings.request_timeout,
    )


def test_get_client_defaults_to_configured_url():
    with patch("app.elastic.AsyncElasticsearch") as es_cls:
        get_client()
    assert es_cls.call_args.args == (settings.elasticsearch_url,)
