"""
Path2Hack Backend: Project Route Handler
=========================================

What:  POST /api/createProject (multipart/form-data).
How:   Reads the optional `imageUrl` file part and the text fields, then hands
       everything to ProjectService.

Form fields arrive as strings exactly as the browser sends them; decoding of
`techStack` and the boolean flags happens in the service.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from path2hack.database import get_db_session
from path2hack.schemas.common import ErrorResponse
from path2hack.schemas.project import ProjectCreatedResponse, ProjectSubmission
from path2hack.services.file_service import FileService, get_file_service
from path2hack.services.project_service import project_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Projects"])


@router.post(
    "/createProject",
    status_code=201,
    response_model=ProjectCreatedResponse,
    responses={
        201: {"description": "Project created", "model": ProjectCreatedResponse},
        400: {"description": "Project name already taken", "model": ErrorResponse},
        500: {"description": "Storage, decoding or database failure", "model": ErrorResponse},
    },
    summary="Submit a hackathon project",
)
async def create_project(
    projectName: str = Form(...),
    hackathonName: Optional[str] = Form(None),
    devpostUrl: Optional[str] = Form(None),
    devfolioUrl: Optional[str] = Form(None),
    githubUrl: Optional[str] = Form(None),
    projectDescription: Optional[str] = Form(None),
    techStack: Optional[str] = Form(None, description='JSON array, e.g. ["React", "FastAPI"]'),
    isProjectPublic: Optional[str] = Form(None, description='"true" or "false"'),
    isWinner: Optional[str] = Form(None, description='"true" or "false"'),
    userName: Optional[str] = Form(None),
    imageUrl: Optional[UploadFile] = File(None, description="Optional cover image"),
    db: AsyncSession = Depends(get_db_session),
    files: FileService = Depends(get_file_service),
) -> ProjectCreatedResponse:
    """Create a project; a duplicate name answers 400."""
    submission = ProjectSubmission(
        project_name=projectName,
        hackathon_name=hackathonName,
        devpost_url=devpostUrl,
        devfolio_url=devfolioUrl,
        github_url=githubUrl,
        project_description=projectDescription,
        tech_stack=techStack,
        is_project_public=isProjectPublic,
        is_winner=isWinner,
        user_name=userName,
    )

    image_name = None
    image_content = None
    if imageUrl is not None:
        image_name = imageUrl.filename
        image_content = await imageUrl.read()

    try:
        await project_service.create_project(
            db,
            files,
            submission,
            image_name=image_name,
            image_content=image_content,
        )
    finally:
        if imageUrl is not None:
            await imageUrl.close()

    return ProjectCreatedResponse()
