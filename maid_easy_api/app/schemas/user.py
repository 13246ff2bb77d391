"""
Pydantic models for users and credentials.

``UserCreate`` is what a visitor sends to register, ``UserLogin`` is
the login payload and ``User`` is the stored record.  The stored
password hash never leaves the server: it is excluded from every
serialization of ``User``.  Clients cannot choose a role; accounts
created through registration are always customers.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from .common import ApiModel, Email, RecordModel


class UserRole(str, Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


class UserCreate(ApiModel):
    """Schema for registering a user."""

    # Passwords are taken verbatim.
    model_config = {"str_strip_whitespace": False}

    username: str = Field(..., min_length=3, examples=["priya"])
    password: str = Field(..., min_length=6, examples=["strongpassword"])
    email: Email = Field(..., examples=["priya@example.com"])
    name: str = Field(..., min_length=2, examples=["Priya Sharma"])


class UserLogin(ApiModel):
    model_config = {"str_strip_whitespace": False}

    username: str = Field(..., min_length=3)
    password: str = Field(..., min_length=6)


class User(RecordModel):
    id: int
    username: str
    password: str = Field(..., exclude=True, repr=False)
    email: str
    name: str
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime


def new_user(
    user_id: int,
    data: UserCreate,
    password_hash: str,
    created_at: datetime,
    role: UserRole = UserRole.CUSTOMER,
) -> User:
    """Build the stored record for a registration.

    ``password_hash`` replaces the plaintext password from ``data``.
    """
    return User(
        id=user_id,
        username=data.username,
        password=password_hash,
        email=data.email,
        name=data.name,
        role=role,
        created_at=created_at,
    )
