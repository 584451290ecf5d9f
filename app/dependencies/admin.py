from fastapi import Depends, HTTPException, status
from app.models.user import User
from app.utils.token import get_current_user

ADMIN_ROLE = "admin"


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != ADMIN_ROLE:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return current_user
