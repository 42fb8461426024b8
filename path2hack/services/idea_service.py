"""
Path2Hack Backend: Idea Service
================================

What:  Builds project-idea prompts and forwards them to the generative model.
Who:   Called by the routes in routes/ideas.py.

Operations:
    - github_project_idea(): languages from the user's top GitHub repos + idea text
    - project_idea():        description + theme + keywords

Both return the model's completion verbatim. Every failure inside an operation is
re-raised as a Path2HackError carrying that endpoint's public message; the cause
is chained and logged, never returned.
"""

import logging
from typing import List

from path2hack.exceptions import UpstreamServiceError
from path2hack.services.github_service import GitHubService
from path2hack.services.llm_base import LLMService

logger = logging.getLogger(__name__)

IDEA_FORMAT_INSTRUCTIONS = (
    "Write a unique project idea in the format: Project Name: description: "
    "what makes it unique: tech stack: features: and another important things "
    "DO NOT WRITE ANYTHING ELSE OR USELESS"
)

GITHUB_IDEA_ERROR = "Error fetching GitHub repositories"
PROJECT_IDEA_ERROR = "Error generating project idea"


def build_github_idea_prompt(languages: List[str], idea_description: str) -> str:
    """Prompt for the GitHub-derived generator; languages are listed comma-separated."""
    return (
        f"A user whose top GitHub Repos consist of these languages : {', '.join(languages)}. "
        f"Give review in about 1 line, idea description is {idea_description} "
        f"({IDEA_FORMAT_INSTRUCTIONS})"
    )


def build_project_idea_prompt(description: str, theme: str, keywords: List[str]) -> str:
    """Prompt for the freeform generator. Keyword count and content are not checked."""
    return (
        "Generate a unique project idea based on the following description, theme, and keywords:\n"
        "\n"
        f"Description: {description}\n"
        f"Theme: {theme}\n"
        f"Keywords: {', '.join(keywords)}\n"
        "\n"
        f"{IDEA_FORMAT_INSTRUCTIONS}"
    )


class IdeaService:
    """Stateless; collaborators are passed per call so routes can inject them."""

    async def github_project_idea(
        self,
        llm: LLMService,
        github: GitHubService,
        github_username: str,
        idea_description: str,
    ) -> str:
        """
        Generate an idea tailored to the languages a GitHub user works in.

        Raises:
            UpstreamServiceError("Error fetching GitHub repositories") on any failure,
            whether GitHub, JSON decoding or the model call.
        """
        try:
            languages = await github.get_languages(github_username)
            prompt = build_github_idea_prompt(languages, idea_description)
            idea = await llm.generate_text(prompt)
        except Exception as e:
            logger.error("GitHub idea generation failed for %s: %s", github_username, e)
            raise UpstreamServiceError(
                message=GITHUB_IDEA_ERROR,
                context={"username": github_username, "error_type": type(e).__name__},
            ) from e

        logger.debug("Generated GitHub idea: %s", idea)
        return idea

    async def project_idea(
        self,
        llm: LLMService,
        description: str,
        theme: str,
        keywords: List[str],
    ) -> str:
        """Generate an idea from free text. Raises UpstreamServiceError on failure."""
        try:
            prompt = build_project_idea_prompt(description, theme, keywords)
            idea = await llm.generate_text(prompt)
        except Exception as e:
            logger.error("Project idea generation failed: %s", e)
            raise UpstreamServiceError(
                message=PROJECT_IDEA_ERROR,
                context={"error_type": type(e).__name__},
            ) from e

        logger.debug("Generated project idea: %s", idea)
        return idea


idea_service = IdeaService()
