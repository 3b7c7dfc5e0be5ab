import secrets
from typing import Optional

from fastapi import Depends, Query

from ..config import Settings, get_settings
from ..core.exceptions import UnauthorizedError
from ..news.services.ingestion_service import NewsIngestionService


def get_ingestion_service(settings: Settings = Depends(get_settings)) -> NewsIngestionService:
    return NewsIngestionService(settings)


def verify_cron_key(
    key: Optional[str] = Query(None, description="Shared secret for the processing trigger"),
    settings: Settings = Depends(get_settings),
) -> None:
    # an unset secret locks the trigger instead of opening it
    expected = settings.cron_secret_key
    if not expected or not key or not secrets.compare_digest(key, expected):
        raise UnauthorizedError()
