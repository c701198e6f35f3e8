# catalog_service/models.py
from typing import Optional

from pydantic import BaseModel


class Credentials(BaseModel):
    # Both optional so that a missing field is reported as
    # "Missing username or password" instead of a validation error.
    username: Optional[str] = None
    password: Optional[str] = None


class User(BaseModel):
    username: str
    password: str


class Message(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str
    message: str
