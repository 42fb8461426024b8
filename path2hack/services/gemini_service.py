"""
Path2Hack Backend: Google Gemini Service Implementation
========================================================

What:  Concrete LLMService backed by the Google Generative AI SDK.
How:   One GenerativeModel instance (fixed model identifier from settings) is
       shared by all requests; each call is a single generate_content_async().
Who:   Instantiated once at import; used by IdeaService and ReviewService.

Failure policy:
    Any SDK error (network, quota, blocked prompt, empty candidate) surfaces as
    LLMServiceError on the first attempt. There is no retry and no circuit
    breaker: the calling endpoint answers 500 and the user may resubmit.
"""

import asyncio
import logging
import time
import uuid

import google.generativeai as genai

from path2hack.config import settings
from path2hack.exceptions import LLMServiceError
from path2hack.services.llm_base import LLMService

logger = logging.getLogger(__name__)


def _list_model_names():
    return [m.name for m in genai.list_models()]


class GeminiService(LLMService):
    """
    Google Gemini implementation of the generative-review client.

    The SDK keeps authentication in module-level state, so `genai.configure()`
    runs once here rather than per request.
    """

    def __init__(self, model_name: str | None = None):
        if settings.gemini_api_key and settings.gemini_api_key != "your_gemini_api_key_here":
            genai.configure(api_key=settings.gemini_api_key)

        self.model_name = model_name or settings.gemini_model
        self.model = genai.GenerativeModel(self.model_name)

        logger.info("GeminiService initialized with model=%s", self.model_name)

    async def generate_text(self, prompt: str) -> str:
        """
        Generate a completion for `prompt`.

        Returns:
            The model's text exactly as returned (not stripped or reformatted).

        Raises:
            LLMServiceError: On any SDK failure, including responses whose
                `.text` accessor raises because no candidate was produced.
        """
        # Short per-call ID for correlating log lines under concurrency
        call_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        logger.info("[%s] Gemini generate: prompt of %d chars", call_id, len(prompt))

        try:
            response = await self.model.generate_content_async(prompt)
            text = response.text
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.warning(
                "[%s] Gemini call failed after %.0fms: %s",
                call_id,
                duration_ms,
                str(e),
            )
            raise LLMServiceError(
                message="AI generation failed.",
                context={"call_id": call_id, "error_type": type(e).__name__},
            ) from e

        duration_ms = (time.time() - start_time) * 1000
        logger.info(
            "[%s] Gemini generate completed in %.0fms, %d chars",
            call_id,
            duration_ms,
            len(text or ""),
        )
        return text or ""

    async def health_check(self) -> bool:
        """
        Check if the Gemini API is reachable.

        How: list_models() verifies key and connectivity without spending tokens.
        The SDK call blocks, so it runs on a worker thread.
        """
        try:
            model_names = await asyncio.to_thread(_list_model_names)
            target = f"models/{self.model_name}"
            if target not in model_names:
                logger.warning("Configured model %s not found in available models", target)
            return True
        except Exception as e:
            logger.warning("Gemini health check failed: %s", str(e))
            return False


# ── Singleton Instance ────────────────────────────────────────────────────
# One SDK model object for the whole process
gemini_service = GeminiService()


def get_llm_service() -> LLMService:
    """FastAPI dependency returning the process-wide model client."""
    return gemini_service
