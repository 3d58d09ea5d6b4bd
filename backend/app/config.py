from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    elasticsearch_url: str = "http://localhost:9200"
    index_name: str = "jobs"
    # Upper bound for a single engine call; no operation may block indefinitely.
    request_timeout: float = 10.0
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    model_config = {"env_prefix": "JOBSEARCH_"}


settings = Settings()
