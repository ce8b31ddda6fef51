"""Payment experience web profile service."""

from __future__ import annotations

from paypal_rest.client import PayPalClient
from paypal_rest.models.web_profiles import CreateProfileResponse, WebProfile

PROFILE_PATH = "/v1/payment-experience/web-profiles"


class WebProfileService:
    """Manage payment experience web profiles."""

    def __init__(self, client: PayPalClient) -> None:
        self._client = client

    def create(self, profile: WebProfile) -> CreateProfileResponse:
        return self._client.post(PROFILE_PATH, body=profile, result_type=CreateProfileResponse)

    def get(self, profile_id: str) -> WebProfile:
        return self._client.get(f"{PROFILE_PATH}/{profile_id}", result_type=WebProfile)

    def list(self) -> list[WebProfile]:
        return self._client.get(PROFILE_PATH, result_type=list[WebProfile])

    def update(self, profile: WebProfile) -> None:
        """Replace a profile; the profile must carry its id."""
        if not profile.id:
            raise ValueError("Cannot update a web profile without an id")
        self._client.put(f"{PROFILE_PATH}/{profile.id}", body=profile)

    def delete(self, profile_id: str) -> None:
        self._client.delete(f"{PROFILE_PATH}/{profile_id}")
