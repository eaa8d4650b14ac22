from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request. Field rules are enforced by the use case."""
    username: str
    password: str
    role: str
    deposit: int = 0


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: str
    password: str


class TokenResponse(BaseModel):
    """DTO for authentication token response"""
    access_token: str
    token_type: str = "bearer"
