from fastapi import APIRouter, Depends
from app.modules.scraper.fetcher import PageFetcher, get_page_fetcher
from app.modules.scraper.schemas import UrlRequest, FetchUrlResponse, ScrapeContentResponse
from app.modules.scraper.service import ScraperService

router = APIRouter(tags=["scraper"])


def get_scraper_service(fetcher: PageFetcher = Depends(get_page_fetcher)) -> ScraperService:
    return ScraperService(fetcher)


@router.post("/fetch-url", response_model=FetchUrlResponse)
async def fetch_url(
    body: UrlRequest,
    service: ScraperService = Depends(get_scraper_service)
):
    """Readable title, text and description of a page"""
    return await service.fetch_url(body.url)


@router.post("/scrape-content", response_model=ScrapeContentResponse)
async def scrape_content(
    body: UrlRequest,
    service: ScraperService = Depends(get_scraper_service)
):
    """Cleaned main content of a page"""
    return await service.scrape_content(body.url)
