"""Schemas for login, logout and session checks"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials posted to /login"""

    username: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


class LoginResponse(BaseModel):
    """Successful login; session_hash goes into Authorization: Bearer <hash>"""

    success: bool = True
    message: str = "Login successful"
    session_hash: str
