from __future__ import annotations

from car_registry.domain.errors import ValidationError


def require_user_id(user_id: int | None) -> int:
    """
    Reject a missing owner id before any repository access.

    Raises:
        ValidationError: If user_id is None or not an integer
    """
    if user_id is None or isinstance(user_id, bool) or not isinstance(user_id, int):
        raise ValidationError(
            errors=[
                {
                    "field": "user_id",
                    "message": "Owner id is required",
                    "code": "REQUIRED",
                }
            ]
        )
    return user_id
