"""Validadores de payloads enviados à API Asaas.

Uso:
    from api.validators.asaas import (
        PayloadValidationError,
        validate_subscription_create,
    )

    validate_subscription_create(payload)
"""

from api.validators.asaas.errors import PayloadValidationError
from api.validators.asaas.limits import (
    DEFAULT_CYCLE,
    MAX_DESCRIPTION_LENGTH,
    VALID_CYCLES,
)
from api.validators.asaas.shopper import (
    MISSING_SHOPPER_FIELDS_MESSAGE,
    validate_shopper_subscription,
)
from api.validators.asaas.subaccount import validate_subaccount_payload
from api.validators.asaas.subscription import (
    validate_subscription_create,
    validate_subscription_update,
)
from api.validators.asaas.webhook import validate_webhook_registration

__all__ = [
    "DEFAULT_CYCLE",
    "MAX_DESCRIPTION_LENGTH",
    "MISSING_SHOPPER_FIELDS_MESSAGE",
    "VALID_CYCLES",
    "PayloadValidationError",
    "validate_shopper_subscription",
    "validate_subaccount_payload",
    "validate_subscription_create",
    "validate_subscription_update",
    "validate_webhook_registration",
]
