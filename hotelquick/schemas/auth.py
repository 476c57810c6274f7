from pydantic import BaseModel, EmailStr, Field
from typing import Literal

class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    role: Literal["consumer", "provider"]

class IdentityOut(BaseModel):
    id: str
    name: str
    email: str
    role: str
