"""Constants for the EMQX management API adapter.

API Documentation: https://docs.emqx.com/en/emqx/latest/admin/api.html
Authentication: Basic auth with an API key/secret pair.
"""

# GET /api/v5/subscriptions?topic=...&limit=1
# With limit=1 only one subscription is returned, but meta.count holds the total.
SUBSCRIPTIONS_PATH = "/api/v5/subscriptions"
SUBSCRIPTIONS_LIMIT = 1

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
