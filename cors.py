from typing import Any, Dict

from fastapi.responses import JSONResponse, Response

# Shared CORS policy attached to every response, error responses included
CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "GET, POST, PUT, PATCH, DELETE, OPTIONS",
}


def preflight_response() -> Response:
    return Response(status_code=200, headers=dict(CORS_HEADERS))


def json_response(body: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    # JSONResponse sets Content-Type: application/json itself
    return JSONResponse(content=body, status_code=status_code, headers=dict(CORS_HEADERS))
