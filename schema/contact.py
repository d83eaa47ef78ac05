from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator
from email_validator import EmailNotValidError, validate_email
from pydantic_core import PydanticCustomError
from typing import Optional
from datetime import datetime

NAME_MAX_LEN = 100
SUBJECT_MAX_LEN = 200
MESSAGE_MAX_LEN = 2000


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required_error(field_name: str) -> PydanticCustomError:
    return PydanticCustomError(
        "required", "{field} is required", {"field": field_name.capitalize()}
    )


def _too_long_error(field_name: str, max_len: int) -> PydanticCustomError:
    return PydanticCustomError(
        "too_long",
        "{field} must be {max_len} characters or fewer",
        {"field": field_name.capitalize(), "max_len": max_len},
    )


class ContactRequest(BaseModel):
    """Inbound contact form payload.

    Missing fields default to None so that they go through the same
    "is required" check as blank ones and every offending field is
    reported in one response.
    """
    name: str = Field(default=None, validate_default=True)
    email: EmailStr = Field(default=None, validate_default=True)
    subject: Optional[str] = None
    message: str = Field(default=None, validate_default=True)

    @field_validator("name", "message", mode="before")
    @classmethod
    def check_required(cls, value, info):
        if _is_blank(value):
            raise _required_error(info.field_name)
        return value

    @field_validator("email", mode="wrap")
    @classmethod
    def check_email(cls, value, handler, info):
        if _is_blank(value):
            raise _required_error(info.field_name)
        try:
            handler(value)
            # EmailStr also takes "Name <addr>", the bare address alone is valid here
            validate_email(value, check_deliverability=False)
        except (ValidationError, EmailNotValidError):
            raise PydanticCustomError("email", "Must be a valid email address")
        # keep the address exactly as submitted, not the normalized form
        return value

    @field_validator("name")
    @classmethod
    def check_name_length(cls, value: str) -> str:
        if len(value) > NAME_MAX_LEN:
            raise _too_long_error("name", NAME_MAX_LEN)
        return value

    @field_validator("subject")
    @classmethod
    def check_subject_length(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and len(value) > SUBJECT_MAX_LEN:
            raise _too_long_error("subject", SUBJECT_MAX_LEN)
        return value

    @field_validator("message")
    @classmethod
    def check_message_length(cls, value: str) -> str:
        if len(value) > MESSAGE_MAX_LEN:
            raise _too_long_error("message", MESSAGE_MAX_LEN)
        return value


class ContactSubmissionOut(BaseModel):
    id: int
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    submitted_at: datetime = Field(serialization_alias="submittedAt")

    class Config:
        from_attributes = True
