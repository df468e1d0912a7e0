"""Data models for the timeline project."""

from pydantic import BaseModel, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from timeline.common.constants import CONTENT_TOO_LONG_MSG, MAX_CONTENT_LENGTH, MISSING_FIELDS_MSG
from timeline.common.exceptions import ValidationFault

CONTENT_TOO_LONG = "content_too_long"


def text_length(text: str) -> int:
    """Length of the text in UTF-16 code units."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


class Post(BaseModel):
    """Public view of a stored post."""

    author: str
    content: str
    timestamp: str


class NewPost(BaseModel):
    """A validated request to create a post."""

    author: str
    content: str
    timestamp: str

    @field_validator("author", "content", "timestamp", mode="before")
    @classmethod
    def check_present(cls, v):
        """Reject empty values before type checks."""
        if v is None or v == "":
            raise PydanticCustomError("required_field", MISSING_FIELDS_MSG)
        return v

    @field_validator("content")
    @classmethod
    def check_content_length(cls, v: str) -> str:
        if text_length(v) > MAX_CONTENT_LENGTH:
            raise PydanticCustomError(CONTENT_TOO_LONG, CONTENT_TOO_LONG_MSG)
        return v

    @classmethod
    def from_payload(cls, payload) -> "NewPost":
        """Build a NewPost from a decoded request body.

        A missing field takes precedence over a too long content, whatever
        order pydantic reports the errors in.
        """
        if not isinstance(payload, dict):
            raise ValidationFault(MISSING_FIELDS_MSG)
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            if all(err["type"] == CONTENT_TOO_LONG for err in e.errors()):
                raise ValidationFault(CONTENT_TOO_LONG_MSG) from e
            raise ValidationFault(MISSING_FIELDS_MSG) from e
