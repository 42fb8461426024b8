"""
Path2Hack Backend: User Route Handlers
=======================================

What:  POST /api/register.
How:   Delegates to UserService; picks 201 or 200 from the outcome.
"""

import logging
from typing import Union

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from path2hack.database import get_db_session
from path2hack.schemas.common import ErrorResponse
from path2hack.schemas.user import (
    RegisterCreatedResponse,
    RegisterExistsResponse,
    RegisterRequest,
)
from path2hack.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Users"])


@router.post(
    "/register",
    status_code=201,
    response_model=None,
    responses={
        200: {"description": "Email already registered", "model": RegisterExistsResponse},
        201: {"description": "User registered", "model": RegisterCreatedResponse},
        500: {"description": "Database failure", "model": ErrorResponse},
    },
    summary="Register a user by email",
)
async def register(
    body: RegisterRequest,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> Union[RegisterCreatedResponse, RegisterExistsResponse]:
    """
    Register a user, or report that the email already exists.

    An existing email is not a failure: the answer is 200 with `{"exists": true}`
    and no row is written.
    """
    created = await user_service.register(db, username=body.username, email=body.email)
    if not created:
        response.status_code = 200
        return RegisterExistsResponse()
    return RegisterCreatedResponse()
