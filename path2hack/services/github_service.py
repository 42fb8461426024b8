"""
Path2Hack Backend: GitHub Repository Listing Client
====================================================

What:  Reads a user's public repositories from the GitHub REST API and
       derives the set of primary languages they use.
How:   Unauthenticated `GET {github_api_url}/users/{username}/repos` via httpx.
Who:   Used by IdeaService for POST /api/githubProjectIdea.

The listing endpoint returns a JSON array of repository objects
(`{"name": ..., "language": ..., ...}`); only the first `github_repo_limit`
entries are considered, in the order GitHub returns them.
"""

import logging
from collections import Counter
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from path2hack.config import settings
from path2hack.exceptions import GitHubServiceError

logger = logging.getLogger(__name__)


def tally_languages(repos: List[Dict[str, Any]]) -> Counter:
    """
    Count repositories per primary language.

    Repositories without a detected language are counted under None.
    The Counter keeps first-seen order, which callers rely on.
    """
    return Counter(repo.get("language") for repo in repos)


def distinct_languages(language_count: Counter) -> List[str]:
    """Languages in first-seen order, without the None bucket."""
    return [language for language in language_count if language is not None]


class GitHubService:
    """Thin async client for the GitHub public repository listing."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        repo_limit: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.github_api_url).rstrip("/")
        self.repo_limit = repo_limit or settings.github_repo_limit
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        # Tests inject httpx.MockTransport here
        self._transport = transport

    async def list_repositories(self, username: str) -> List[Dict[str, Any]]:
        """
        Fetch up to `repo_limit` public repositories for `username`.

        Raises:
            GitHubServiceError: Transport failure, non-2xx status (unknown user,
                rate limit), undecodable body, or a payload that is not a list.
        """
        url = f"{self.base_url}/users/{quote(username, safe='')}/repos"
        headers = {"Accept": "application/vnd.github+json"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "GitHub listing for %s returned %d",
                username,
                exc.response.status_code,
            )
            raise GitHubServiceError(
                context={"username": username, "status": exc.response.status_code},
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("GitHub listing for %s failed: %s", username, exc)
            raise GitHubServiceError(
                context={"username": username, "error_type": type(exc).__name__},
            ) from exc

        if not isinstance(payload, list):
            raise GitHubServiceError(
                message="Unexpected GitHub repository payload",
                context={"username": username, "payload_type": type(payload).__name__},
            )

        repos = [
            {"name": repo.get("name"), "language": repo.get("language")}
            for repo in payload[: self.repo_limit]
            if isinstance(repo, dict)
        ]
        logger.info("Fetched %d repositories for %s", len(repos), username)
        return repos

    async def get_languages(self, username: str) -> List[str]:
        """Distinct non-null primary languages across the user's top repositories."""
        repos = await self.list_repositories(username)
        return distinct_languages(tally_languages(repos))


# ── Singleton Instance ────────────────────────────────────────────────────
github_service = GitHubService()


def get_github_service() -> GitHubService:
    """FastAPI dependency returning the shared GitHub client."""
    return github_service
