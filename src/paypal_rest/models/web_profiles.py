"""Payment experience web profiles.

https://developer.paypal.com/docs/api/payment-experience/
"""

from __future__ import annotations

from pydantic import BaseModel

# Values for InputFields.no_shipping
NO_SHIPPING_DISPLAY = 0
NO_SHIPPING_HIDE = 1
NO_SHIPPING_BUYER_ACCOUNT = 2

# Values for InputFields.address_override
ADDR_OVERRIDE_FROM_FILE = 0
ADDR_OVERRIDE_FROM_CALL = 1

# Values for FlowConfig.landing_page_type
LANDING_PAGE_TYPE_BILLING = "Billing"
LANDING_PAGE_TYPE_LOGIN = "Login"


class Presentation(BaseModel):
    """Branding and locale shown on redirect payments."""
    brand_name: str | None = None
    logo_image: str | None = None
    locale_code: str | None = None


class InputFields(BaseModel):
    allow_note: bool | None = None
    no_shipping: int | None = None
    address_override: int | None = None


class FlowConfig(BaseModel):
    landing_page_type: str | None = None
    bank_txn_pending_url: str | None = None
    user_action: str | None = None


class WebProfile(BaseModel):
    id: str | None = None
    name: str
    temporary: bool | None = None
    presentation: Presentation | None = None
    input_fields: InputFields | None = None
    flow_config: FlowConfig | None = None


class CreateProfileResponse(BaseModel):
    id: str
