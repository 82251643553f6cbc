"""Request/response plumbing shared by the Lambda handlers.

The public base of a short URL is always derived from the request that
created it, so the same code serves a custom domain, the default
execute-api domain and `sam local`:

    >>> base_url({'requestContext': {'domainName': 'share-up.example.com', 'stage': 'Prod'}})
    'https://share-up.example.com'
    >>> base_url({'requestContext': {'domainName': 'abc123.execute-api.us-east-1.amazonaws.com', 'stage': 'Prod'}})
    'https://abc123.execute-api.us-east-1.amazonaws.com/Prod'
    >>> base_url({})
    'http://localhost:3000'
"""

import os
import re
import json
import base64
import binascii
import logging
import functools
from typing import Any
from collections.abc import Callable

from shareup.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from shareup.exceptions import MissingEnvironmentVariableError, ValidationError
from shareup.types import LambdaEvent
from shareup.utils.runtime import running_locally
from shareup.utils.responses import response_500


logger = logging.getLogger(__name__)

HTTP_SCHEME = re.compile(r'^https?://', re.IGNORECASE)
LOCAL_BASE_URL = 'http://localhost:3000'

# HTTP API default stage, served without a path prefix
DEFAULT_STAGE = '$default'

INVALID_JSON_BODY = 'Invalid JSON body'


def base_url(event: LambdaEvent) -> str:
    """Public base URL of the API that received `event`

    Resolution order:
        1. requestContext.domainName: custom domains as https://<domain>,
           default execute-api domains as https://<domain>/<stage>
           (no stage segment for the HTTP API $default stage)
        2. Host header, with X-Forwarded-Proto as scheme (https if absent)
        3. http://localhost:3000
    """
    request_context = event.get('requestContext') or {}
    if domain := request_context.get('domainName'):
        stage = request_context.get('stage')
        if 'execute-api' in domain and stage and stage != DEFAULT_STAGE:
            return f'https://{domain}/{stage}'
        return f'https://{domain}'

    headers = {name.lower(): value for name, value in (event.get('headers') or {}).items()}
    if host := headers.get('host'):
        return f'{headers.get("x-forwarded-proto", "https")}://{host}'

    return LOCAL_BASE_URL


def normalize_url(url: str) -> str:
    """Prefix a URL with https:// unless it already carries an http(s) scheme

    Example:
        >>> normalize_url('example.com/file')
        'https://example.com/file'
        >>> normalize_url('http://example.com/file')
        'http://example.com/file'
    """
    return url if HTTP_SCHEME.match(url) else f'https://{url}'


def require_environment(*names: str) -> Callable:
    """Decorator: fail fast with MissingEnvironmentVariableError unless every variable in `names` is set and non-empty

    Example:
        >>> @require_environment('APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID')
        ... def fetch(): ...
        >>> fetch()
        MissingEnvironmentVariableError: Missing required environment variables: 'APPCONFIG_APP_ID', 'APPCONFIG_ENV_ID'
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = ', '.join(f"'{name}'" for name in names if not os.environ.get(name))
            if missing:
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def guarantee_500_response(message: str = 'Internal Server Error') -> Callable:
    """Decorator: respond with a JSON 500 when a Lambda handler raises unexpectedly

    When running locally the original exception is re-raised instead, so SAM
    prints the traceback.

    Args:
        message (str):
            Error message placed in the 500 response body.

    Example:
        >>> @guarantee_500_response('Failed to redirect')
        ... def lambda_handler(event, context):
        ...     raise RuntimeError('boom')
        >>> lambda_handler({}, None)['statusCode']
        500
    """

    def decorator(handler: Callable) -> Callable:
        @functools.wraps(handler)
        def wrapper(event, context, *args, **kwargs):
            try:
                return handler(event, context, *args, **kwargs)
            except Exception:
                if running_locally():
                    raise
                logger.exception(
                    'Unexpected error in Lambda handler. Responding with 500.',
                    extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
                )
                return response_500(message)

        return wrapper

    return decorator


def json_body(event: LambdaEvent) -> dict[str, Any]:
    """Decode the JSON object carried by an API Gateway event

    A missing or empty body, or a JSON value that is not an object, yields {}.

    Raises:
        ValidationError:
            If the body is not valid JSON (or not valid base64 when flagged as such).
    """
    body = event.get('body') or ''
    try:
        if event.get('isBase64Encoded') and body:
            body = base64.b64decode(body).decode('utf-8')
        payload = json.loads(body) if body.strip() else {}
    except (ValueError, binascii.Error) as e:
        raise ValidationError(INVALID_JSON_BODY) from e

    return payload if isinstance(payload, dict) else {}


def last_path_segment(event: LambdaEvent) -> str:
    """Return the final non-empty segment of the request path ('' if none)"""
    path = event.get('rawPath') or event.get('path') or ''
    return path.rstrip('/').rsplit('/', 1)[-1]
