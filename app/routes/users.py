from fastapi import APIRouter, Depends
from app.models.user import User
from app.schemas.user_schemas import UserProfile
from app.utils.token import get_current_user

router = APIRouter()


@router.get("/me", response_model=UserProfile)
def get_my_profile(current_user: User = Depends(get_current_user)):
    return UserProfile(
        id=current_user.id,
        first_name=current_user.first_name,
        last_name=current_user.last_name,
        email=current_user.email,
        role=current_user.role,
        created_at=current_user.created_at,
    )
