"""
Path2Hack Backend: Scrape-and-Review Service
=============================================

What:  Reviews a published project page with the generative model.

Pipeline (strictly sequential, one request at a time per call):
    ┌─────────┐    ┌──────────┐    ┌──────────────┐    ┌──────────┐
    │  Fetch  │───▶│  Parse & │───▶│ Build review │───▶│  Gemini  │
    │  (URL)  │    │  flatten │    │    prompt    │    │          │
    └─────────┘    └──────────┘    └──────────────┘    └──────────┘

Any failure along the way becomes one UpstreamServiceError with the endpoint's
static message; there is no partial result and nothing to compensate.
"""

import logging

from path2hack.exceptions import UpstreamServiceError
from path2hack.services.llm_base import LLMService
from path2hack.services.scrape_service import PageFetcher, extract_page_text

logger = logging.getLogger(__name__)

REVIEW_ERROR = "Error scraping and reviewing project"


def build_review_prompt(page_text: str) -> str:
    """Review prompt asking for a review, improvements and a 1-10 rating."""
    return (
        "Review the following project and provide feedback on areas of improvement.\n"
        "Rate the project on a scale of 1 to 10 based on creativity, technical challenge, "
        "and potential impact.\n"
        "\n"
        f"Project Text Content: {page_text}\n"
        "\n"
        "Provide feedback in the following format:\n"
        "Review: [Your Review]\n"
        "Improvements: [Suggested Improvements]\n"
        "Rating (1-10): [Your Rating]\n"
    )


class ReviewService:
    """Stateless orchestrator for the scrape-and-review pipeline."""

    async def scrape_and_review(
        self,
        llm: LLMService,
        fetcher: PageFetcher,
        url: str,
    ) -> str:
        """
        Fetch `url`, extract its visible text and return the model's review.

        A page without any text still gets reviewed; the prompt then carries an
        empty content section.

        Raises:
            UpstreamServiceError("Error scraping and reviewing project")
        """
        try:
            html = await fetcher.fetch(url)
            page_text = extract_page_text(html)
            logger.info("Extracted %d chars of text from %s", len(page_text), url)

            review = await llm.generate_text(build_review_prompt(page_text))
        except Exception as e:
            logger.error("Scrape-and-review failed for %s: %s", url, e)
            raise UpstreamServiceError(
                message=REVIEW_ERROR,
                context={"url": url, "error_type": type(e).__name__},
            ) from e

        return review


review_service = ReviewService()
