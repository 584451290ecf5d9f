from pydantic import BaseModel, EmailStr, Field
from datetime import datetime


class UserRegister(BaseModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str = Field(min_length=3, max_length=130)


class UserResponse(BaseModel):
    message: str
    user_id: int
    email: EmailStr
    role: str


class UserProfile(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: EmailStr
    role: str
    created_at: datetime


class UserLogin(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str
