"""HTTP client for the short URL API.

Failures are classified, never retried:
    ValidationError          -> the public URL was unusable before any request was made
    ShortURLTransportError   -> the API could not be reached (timeout, connection)
    ShortURLServiceError     -> the API answered with an error status
    MalformedResponseError   -> the API answered 200 without a usable short URL

Example:
    >>> client = ShortURLClient('https://share-up.example.com')
    >>> client.generate('https://files.example.com/public/cv-417-2025-10-15.pdf')
    'https://share-up.example.com/V1StGX'
"""

import logging

import requests

from shareup.constants import Limits
from shareup.exceptions import (
    MalformedResponseError,
    ShortURLServiceError,
    ShortURLTransportError,
    ValidationError,
)


logger = logging.getLogger(__name__)

SHORT_URL_ENDPOINT = '/api/short-url'


class ShortURLClient:
    def __init__(
        self,
        api_url: str,
        timeout: float = Limits.CLIENT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.endpoint = f'{api_url.rstrip("/")}{SHORT_URL_ENDPOINT}'
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def generate(self, public_url: str) -> str:
        """Create a short link for `public_url` and return the short URL"""
        if not public_url or not isinstance(public_url, str):
            raise ValidationError('Invalid URL provided')

        try:
            response = self.session.post(
                self.endpoint,
                json={'publicUrl': public_url},
                headers={'Content-Type': 'application/json'},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise ShortURLTransportError(f'Short URL service timed out after {self.timeout:g}s') from e
        except requests.RequestException as e:
            raise ShortURLTransportError(f'Short URL service unreachable: {e}') from e

        if response.status_code != 200:
            message = _error_message(response)
            logger.warning(
                'Short URL service returned an error.',
                extra={'status_code': response.status_code, 'error': message},
            )
            raise ShortURLServiceError(f'Short URL service error ({response.status_code}): {message}', status_code=response.status_code)

        return _short_url(response)


def _error_message(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason or 'Unknown error'
    if isinstance(payload, dict) and payload.get('error'):
        return str(payload['error'])
    return response.reason or 'Unknown error'


def _short_url(response: requests.Response) -> str:
    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError('No data returned from server') from e

    short_url = (payload.get('shortUrl') or payload.get('url')) if isinstance(payload, dict) else payload
    if not short_url or not isinstance(short_url, str):
        raise MalformedResponseError('Invalid short URL format returned from server')
    return short_url
