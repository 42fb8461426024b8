"""
Path2Hack Backend: Abstract LLM Service Interface
==================================================

What:  Contract for the generative-text client: prompt in, text out.
Why:   Idea and review services depend on this interface, not on Gemini, so
       tests (and any future provider) can plug in their own implementation.
How:   Concrete implementations inherit from LLMService and implement
       generate_text() and health_check().
"""

from abc import ABC, abstractmethod


class LLMService(ABC):
    """
    Abstract interface for hosted text-generation models.

    Contract:
        - generate_text() returns the raw completion, unmodified
        - Provider-specific errors are wrapped in LLMServiceError
        - No retries: one call per prompt
    """

    @abstractmethod
    async def generate_text(self, prompt: str) -> str:
        """
        Send a single prompt to the model and return its textual completion.

        Raises:
            LLMServiceError: When the provider call fails or yields no text.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Lightweight reachability probe (must not consume generation quota)."""
        ...
