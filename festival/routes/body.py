import json

from fastapi import Request

from festival.core.errors import ValidationError


async def json_object(request: Request) -> dict:
    """
    The request body as a JSON object.

    Bodies that are not JSON, or JSON that is not an object, read as ``{}`` so
    that the handler's own lookups decide the response. Malformed JSON sent as
    JSON is a 400.
    """
    if "json" not in request.headers.get("content-type", ""):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        raise ValidationError("Invalid request body")
    return body if isinstance(body, dict) else {}
