"""Cross-Origin Headers — the fixed header set attached to every response.

Invariants:
    - Same three CORS headers on every path, success or failure
    - Content-Type is JSON everywhere except the OPTIONS preflight
"""

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS, PUT, DELETE",
}

JSON_CONTENT_TYPE = "application/json"


def json_headers() -> dict[str, str]:
    """CORS headers plus the JSON content type (fresh dict per response)."""
    return {**CORS_HEADERS, "Content-Type": JSON_CONTENT_TYPE}
