import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # If DB_URL is not provided, fall back to a local sqlite file so the API can
    # be run without a Postgres instance.
    DB_URL: str = os.getenv("DB_URL") or "sqlite:///./dev.db"

    PROJECT_NAME: str = os.getenv("PROJECT_NAME") or "Outage Scheduler API"

    # Actor recorded in createdby/modifiedby when a request carries no user id.
    DEFAULT_ACTOR_ID: int = int(os.getenv("DEFAULT_ACTOR_ID") or 0)

    LOG_LEVEL: str = os.getenv("LOG_LEVEL") or "INFO"


settings = Settings()
