"""
Path2Hack Backend: Project Service
===================================

What:  Creation of hackathon project records from the multipart submission form.
Who:   Called by POST /api/createProject.

Workflow:
    1. Store the uploaded image (if any) under a timestamp-prefixed name
    2. Decode techStack (JSON array) and the "true"/"false" flags
    3. Insert the row; the unique index on project_name rejects duplicates

Error Recovery:
    Step 1 fails → 500, nothing inserted
    Step 2 fails → 500, nothing inserted, the stored image stays on disk
    Step 3 duplicate → ConflictError (400), the stored image stays on disk
    Step 3 other failure → 500
"""

import json
import logging
from typing import Any, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from path2hack.exceptions import (
    ConflictError,
    DatabaseError,
    MalformedInputError,
    Path2HackError,
)
from path2hack.models.project import Project
from path2hack.schemas.project import ProjectSubmission
from path2hack.services.file_service import FileService

logger = logging.getLogger(__name__)

CREATE_PROJECT_ERROR = "Error creating project"
DUPLICATE_PROJECT_ERROR = "Project with the same name already exists"


def parse_tech_stack(raw: Optional[str]) -> List[Any]:
    """
    Decode the techStack form field.

    Raises:
        MalformedInputError if the value is missing, not JSON, or not a JSON array.
    """
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise MalformedInputError(
            message=CREATE_PROJECT_ERROR,
            field="techStack",
            context={"reason": "invalid JSON"},
        ) from e

    if not isinstance(value, list):
        raise MalformedInputError(
            message=CREATE_PROJECT_ERROR,
            field="techStack",
            context={"reason": f"expected array, got {type(value).__name__}"},
        )
    return value


def parse_flag(raw: Optional[str]) -> bool:
    """Form booleans: only the exact string "true" is True ("True", "yes", "" are not)."""
    return raw == "true"


class ProjectService:
    """Stateless; session and upload store are injected per request."""

    async def create_project(
        self,
        db: AsyncSession,
        files: FileService,
        submission: ProjectSubmission,
        image_name: Optional[str] = None,
        image_content: Optional[bytes] = None,
    ) -> Project:
        """
        Store the optional image and insert the project.

        Raises:
            ConflictError: A project with the same name already exists.
            Path2HackError: Any other failure, with the public message
                "Error creating project".
        """
        try:
            image_url = None
            if image_content is not None:
                image_url = await files.store_upload(image_name, image_content)

            project = Project(
                project_name=submission.project_name,
                image_url=image_url,
                hackathon_name=submission.hackathon_name,
                devpost_url=submission.devpost_url,
                devfolio_url=submission.devfolio_url,
                github_url=submission.github_url,
                project_description=submission.project_description,
                tech_stack=parse_tech_stack(submission.tech_stack),
                is_project_public=parse_flag(submission.is_project_public),
                is_winner=parse_flag(submission.is_winner),
                user_name=submission.user_name,
            )
            db.add(project)
            await db.flush()

        except IntegrityError as e:
            await db.rollback()
            logger.info("Project name already taken: %s", submission.project_name)
            raise ConflictError(
                message=DUPLICATE_PROJECT_ERROR,
                context={"project_name": submission.project_name},
            ) from e

        except Path2HackError as e:
            logger.error(
                "Failed to create project %s: %s | Context: %s",
                submission.project_name,
                e.message,
                e.context,
            )
            if e.message == CREATE_PROJECT_ERROR:
                raise
            # Keep the error type, swap in the endpoint's public message
            raise type(e)(message=CREATE_PROJECT_ERROR, context=e.context) from e

        except Exception as e:
            logger.error("Unexpected error creating project: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=CREATE_PROJECT_ERROR,
                context={"original_error": type(e).__name__},
            ) from e

        logger.info("Project created: %s (%s)", project.project_name, project.id)
        return project


project_service = ProjectService()
