"""
Path2Hack Backend: Review Route Handler
========================================

What:  POST /api/scrapeAndReviewProject.
Who:   The frontend's "review my project page" action.

The handler only unpacks the body; fetch, extraction and the model call all
live in ReviewService.
"""

import logging

from fastapi import APIRouter, Depends

from path2hack.schemas.common import ErrorResponse
from path2hack.schemas.idea import ReviewResponse, ScrapeReviewRequest
from path2hack.services.gemini_service import get_llm_service
from path2hack.services.llm_base import LLMService
from path2hack.services.review_service import review_service
from path2hack.services.scrape_service import PageFetcher, get_page_fetcher

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Review"])


@router.post(
    "/scrapeAndReviewProject",
    response_model=ReviewResponse,
    responses={500: {"description": "Fetch, parse or model failure", "model": ErrorResponse}},
    summary="Scrape a project page and review it with the model",
)
async def scrape_and_review_project(
    body: ScrapeReviewRequest,
    llm: LLMService = Depends(get_llm_service),
    fetcher: PageFetcher = Depends(get_page_fetcher),
) -> ReviewResponse:
    logger.info("Received review request for %s", body.url)
    review = await review_service.scrape_and_review(llm, fetcher, url=body.url)
    return ReviewResponse(review=review)
