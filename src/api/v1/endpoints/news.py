import structlog
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from src.api.dependencies import get_ingestion_service, verify_cron_key
from src.news.services.ingestion_service import NewsIngestionService

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/api/process-news", dependencies=[Depends(verify_cron_key)])
async def process_news(ingestion_service: NewsIngestionService = Depends(get_ingestion_service)):
    """Run the ingestion pipeline. Meant to be called by an external cron."""
    logger.info("Starting news processing")
    try:
        report = await ingestion_service.run()
    except Exception as e:
        logger.error("News processing failed", error=str(e), exc_info=e)
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    return {
        "success": True,
        "message": f"Successfully processed {report.processed} news items.",
        "processed": report.processed,
    }


@router.get("/test-news-processing", response_class=PlainTextResponse)
async def test_news_processing(ingestion_service: NewsIngestionService = Depends(get_ingestion_service)):
    """Unauthenticated development trigger with a plain-text result"""
    logger.info("Fetching and processing news (test trigger)")
    try:
        report = await ingestion_service.run()
    except Exception as e:
        logger.error("News processing failed", error=str(e), exc_info=e)
        return PlainTextResponse(f"Error: {e}", status_code=500)

    return f"News processing completed. Processed {report.processed} items. Check logs for output."
