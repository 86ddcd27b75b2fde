"""Common mock API responses: tokens, errors."""

import json

TENANT_TOKEN = "tenant-token-abc"
USER_TOKEN = "user-token-xyz"

GET_TOKENS_RESPONSE = {
    "TenantToken": "issued-tenant-token",
    "UserToken": "issued-user-token",
}

SUCCESS_RESPONSE = {"Status": "OK", "Errors": []}

ERROR_AUTH_401 = "Unauthorized: Invalid tenant or user token"

ERROR_VALIDATION_400 = {
    "Status": "BadRequest",
    "Errors": ["Sku is required"],
}

ERROR_THROTTLED_429 = "Too many requests. Try again in 60 seconds."


def sent_json(request):
    """Decode the JSON body of a recorded httpx.Request."""
    return json.loads(request.content)
