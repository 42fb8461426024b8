"""
Path2Hack Backend: Idea & Review Schemas
=========================================

What:  Pydantic models for the AI-backed endpoints:
       POST /api/githubProjectIdea, POST /api/projectIdea, POST /api/scrapeAndReviewProject.
Why:   The wire format is camelCase (shared with the existing frontend);
       Python code uses snake_case through field aliases.
"""

from typing import List

from pydantic import BaseModel, Field


class GitHubIdeaRequest(BaseModel):
    """
    What:  Input for the GitHub-derived idea generator.

    Note on `gitHubToken`:
        Despite the name, this is a plain GitHub username inserted into the
        public listing URL. No authentication is performed with it, and it is
        not treated as a secret.
    """
    github_username: str = Field(alias="gitHubToken", description="GitHub username")
    idea_description: str = Field(alias="ideaDesc", description="Free-text idea description")

    model_config = {"populate_by_name": True}


class ProjectIdeaRequest(BaseModel):
    """Input for the freeform idea generator. Keywords are passed through unchecked."""
    description: str
    theme: str
    keywords: List[str]


class IdeaResponse(BaseModel):
    """Raw model completion, returned verbatim."""
    idea: str


class ScrapeReviewRequest(BaseModel):
    """Page to fetch and review."""
    url: str


class ReviewResponse(BaseModel):
    """Raw model review (review, improvements, rating), returned verbatim."""
    review: str
