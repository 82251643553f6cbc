"""API Gateway (Lambda proxy) response builders.

Every error body has the shape {"error": "<message>"}.
"""

import json
from typing import Any

from shareup.types import LambdaResponse


JSON_HEADERS = {'Content-Type': 'application/json'}


def json_response(status_code: int, body: Any, headers: dict[str, str] | None = None) -> LambdaResponse:
    return {
        'statusCode': status_code,
        'headers': {**JSON_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def response_200(body: dict[str, Any]) -> LambdaResponse:
    return json_response(200, body)


def response_302(*, location: str) -> LambdaResponse:
    return {
        'statusCode': 302,
        'headers': {'Location': location},
        'body': '',  # no body needed for redirects
    }


def response_400(message: str) -> LambdaResponse:
    return json_response(400, {'error': message})


def response_404(message: str) -> LambdaResponse:
    return json_response(404, {'error': message})


def response_500(message: str = 'Internal Server Error') -> LambdaResponse:
    return json_response(500, {'error': message})
