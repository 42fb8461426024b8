"""
Path2Hack Backend: Idea Route Handlers
=======================================

What:  POST /api/githubProjectIdea and POST /api/projectIdea.
How:   Model and GitHub clients arrive through Depends(), so tests override them.
"""

import logging

from fastapi import APIRouter, Depends

from path2hack.schemas.common import ErrorResponse
from path2hack.schemas.idea import GitHubIdeaRequest, IdeaResponse, ProjectIdeaRequest
from path2hack.services.gemini_service import get_llm_service
from path2hack.services.github_service import GitHubService, get_github_service
from path2hack.services.idea_service import idea_service
from path2hack.services.llm_base import LLMService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Ideas"])


@router.post(
    "/githubProjectIdea",
    response_model=IdeaResponse,
    responses={500: {"description": "GitHub or model failure", "model": ErrorResponse}},
    summary="Generate a project idea from a GitHub user's languages",
)
async def github_project_idea(
    body: GitHubIdeaRequest,
    llm: LLMService = Depends(get_llm_service),
    github: GitHubService = Depends(get_github_service),
) -> IdeaResponse:
    """`gitHubToken` is used as a GitHub username; no authentication happens."""
    idea = await idea_service.github_project_idea(
        llm,
        github,
        github_username=body.github_username,
        idea_description=body.idea_description,
    )
    return IdeaResponse(idea=idea)


@router.post(
    "/projectIdea",
    response_model=IdeaResponse,
    responses={500: {"description": "Model failure", "model": ErrorResponse}},
    summary="Generate a project idea from a description, theme and keywords",
)
async def project_idea(
    body: ProjectIdeaRequest,
    llm: LLMService = Depends(get_llm_service),
) -> IdeaResponse:
    idea = await idea_service.project_idea(
        llm,
        description=body.description,
        theme=body.theme,
        keywords=body.keywords,
    )
    return IdeaResponse(idea=idea)
