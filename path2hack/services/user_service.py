"""
Path2Hack Backend: User Service
================================

What:  Registration of portal users.
How:   Insert-if-absent: the row is inserted straight away and the unique index on
       `users.email` decides whether the address was already taken. Two concurrent
       registrations with the same email therefore yield exactly one row.
Who:   Called by POST /api/register.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from path2hack.exceptions import DatabaseError
from path2hack.models.user import User

logger = logging.getLogger(__name__)

REGISTER_ERROR = "Error registering user"


class UserService:
    """Stateless; the session is injected per request."""

    async def register(self, db: AsyncSession, username: str, email: str) -> bool:
        """
        Register a user unless the email is already known.

        Returns:
            True if a new row was inserted, False if the email already existed.
            An existing email is a normal outcome, not an error.

        Raises:
            DatabaseError("Error registering user") for any other database failure.
        """
        try:
            db.add(User(username=username, email=email))
            await db.flush()
        except IntegrityError:
            # Unique index on email: someone registered this address first
            await db.rollback()
            logger.info("Registration skipped, email already exists")
            return False
        except Exception as e:
            logger.error("Failed to register user: %s", str(e), exc_info=True)
            raise DatabaseError(
                message=REGISTER_ERROR,
                context={"original_error": type(e).__name__},
            ) from e

        logger.info("Registered new user %s", username)
        return True


user_service = UserService()
