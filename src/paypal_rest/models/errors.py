"""Error payload returned by the PayPal API on non-2xx responses.

https://developer.paypal.com/docs/api/errors/
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator


class ErrorDetail(BaseModel):
    field: str = ""
    issue: str = ""

    @field_validator("field", "issue", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        return "" if v is None else v


class ErrorResponse(BaseModel):
    name: str = ""
    debug_id: str = ""
    message: str = ""
    information_link: str = ""
    # Older endpoints send a string, newer ones a list of field issues
    details: str | list[ErrorDetail] = ""

    @field_validator("name", "debug_id", "message", "information_link", "details", mode="before")
    @classmethod
    def _null_as_empty(cls, v):
        # Absent and null both decode to ""
        return "" if v is None else v

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.message)
