"""Description of a single API call."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class APIRequest(BaseModel):
    """Method, path and payload of one call against the API base."""
    method: str
    path: str
    body: Any = None
    params: dict[str, str] | None = None
    authenticated: bool = True

    model_config = {"frozen": True}

    def json_body(self) -> Any:
        """Body ready for JSON encoding; pydantic records are dumped by alias."""
        if isinstance(self.body, BaseModel):
            return self.body.model_dump(mode="json", by_alias=True, exclude_none=True)
        if isinstance(self.body, list):
            return [
                item.model_dump(mode="json", by_alias=True, exclude_none=True)
                if isinstance(item, BaseModel) else item
                for item in self.body
            ]
        return self.body
