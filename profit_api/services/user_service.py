from typing import Any, Dict, Iterable, Optional

from profit_api.repositories.base import UserRepository
from profit_api.core.logger import logger
from profit_api.core.exceptions import (
    DatabaseException,
    NotFoundException,
    ValidationException,
)


def lookup_user(
    email: Optional[str],
    users: UserRepository,
    hidden_fields: Iterable[str] = ()
) -> Dict[str, Any]:
    """
    Fetch a single user record by email.

    The record is returned as stored, minus any ``hidden_fields``.

    Args:
        email: Email query parameter, possibly missing
        users: User repository to query
        hidden_fields: Columns to drop before returning the record

    Returns:
        The user record

    Raises:
        ValidationException: If the email is missing or empty
        NotFoundException: If no user has this email
        DatabaseException: If the repository fails
    """
    if not email:
        raise ValidationException("Missing email", field="email")

    try:
        user = users.find_by_email(email)
    except Exception as e:
        logger.error(
            f"Database error during user lookup: {str(e)}",
            extra={"user_email": email},
            exc_info=True
        )
        raise DatabaseException("Server error", operation="find_user_by_email") from e

    if user is None:
        raise NotFoundException("User not found", resource="user")

    hidden = set(hidden_fields)
    return {key: value for key, value in user.items() if key not in hidden}
