from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from profit_api.dependencies import get_user_repository
from profit_api.repositories.base import UserRepository
from profit_api.services.user_service import lookup_user
from profit_api.schemas.errors import ErrorResponse
from profit_api.core.config import settings
from profit_api.core.logger import logger

router = APIRouter(tags=["users"])

@router.get(
    "/users",
    status_code=200,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_user(
    request: Request,
    email: Optional[str] = None,
    users: UserRepository = Depends(get_user_repository)
):
    """
    Look up one user by email and return the stored record.

    Args:
        request: FastAPI request object for logging
        email: Email of the user to fetch
        users: User repository

    Returns:
        The user record as JSON
    """
    logger.info(
        f"User lookup request received",
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "user_email": email
        }
    )

    user = lookup_user(email, users, hidden_fields=settings.user_hidden_fields)

    return JSONResponse(status_code=200, content=jsonable_encoder(user))
