"""Login request schema for user authentication."""

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Payload for login attempts."""

    username: str
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
