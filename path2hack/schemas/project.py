"""
Path2Hack Backend: Project Schemas
===================================

What:  Models for POST /api/createProject.

The endpoint accepts multipart/form-data, so the request side is not a JSON
body. `ProjectSubmission` is the decoded form as the service layer sees it,
after the route has stored the upload and before techStack/boolean coercion.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ProjectSubmission(BaseModel):
    """Raw form fields, as strings, exactly as the browser sent them."""
    project_name: str
    hackathon_name: Optional[str] = None
    devpost_url: Optional[str] = None
    devfolio_url: Optional[str] = None
    github_url: Optional[str] = None
    project_description: Optional[str] = None
    # JSON-encoded array, e.g. '["Python", "FastAPI"]'
    tech_stack: Optional[str] = None
    # Only the exact string "true" means True
    is_project_public: Optional[str] = None
    is_winner: Optional[str] = None
    user_name: Optional[str] = None


class ProjectCreatedResponse(BaseModel):
    """201 body after a project row was inserted."""
    message: str = Field(default="Project created successfully")
