import functools
import logging

from shareup.types import LambdaEvent, LambdaContext, LambdaResponse
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.factory import build_short_link_dao
from shareup.dao.exceptions import DataStoreError, ShortLinkNotFoundError
from shareup.exceptions import ConfigurationError
from shareup.services import resolve_short_link
from shareup.services.resolver import SHORT_ID_NOT_PROVIDED
from shareup.utils import load_config, app_prefix, guarantee_500_response
from shareup.utils.helpers import last_path_segment
from shareup.utils.responses import response_302, response_400, response_404, response_500
from shareup.lambdas.redirect_url.constants import (
    MISSING_SHORT_ID,
    SHORT_URL_NOT_FOUND,
    REDIRECT_SUCCESS,
    DATABASE_ERROR,
    CONFIGURATION_ERROR,
    SHORT_URL_NOT_FOUND_MESSAGE,
    FAILED_TO_REDIRECT,
)


logger = logging.getLogger(__name__)


@functools.cache
def short_link_dao() -> ShortLinkBaseDAO:
    """Build the short link DAO once per Lambda execution environment"""
    app_config = load_config('redirect_url')
    return build_short_link_dao(app_config, prefix=app_prefix())


def extract_short_id(event: LambdaEvent) -> str:
    """Return the short ID from the 'shortcode' path parameter, else the last path segment"""
    path_parameters = event.get('pathParameters') or {}
    return path_parameters.get('shortcode') or last_path_segment(event)


@guarantee_500_response(FAILED_TO_REDIRECT)
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to redirect short URLs

    This Lambda handler follows this procedure to redirect URLs:
    - Step 1: Extract short ID from request path
    - Step 2: Acquire the (process-wide) short link DAO
    - Step 3: Look up and normalize the original URL
    - Step 4: Redirect client to the original URL

    Lookups are read-only. A missing record and a failing data store are
    reported differently (404 vs 500).

    HTTP responses:
        302: Successful redirect
            headers:
                Location: original URL (https:// prepended when it has no http(s) scheme)
        400: Bad client request
            error: 'Short ID not provided'
        404: Not found
            error: 'Short URL not found'
        500: Internal server error
            error: 'Failed to redirect'

    Args:
        event (LambdaEvent):
            API Gateway event payload containing the shortcode path parameter.
        context (LambdaContext):
            AWS Lambda runtime context object (not used directly).

    Returns:
        LambdaResponse:
            API Gateway-compatible response including statusCode, headers, and body.

    Example:
        >>> event = {'pathParameters': {'shortcode': 'V1StGX'}}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://files.example.com/public/cv-123-2025-10-15.pdf'
    """
    # 1- Extract short ID from request's path
    short_id = extract_short_id(event)
    if not short_id:
        logger.info('Missing short ID in path. Responding with 400.', extra={'event': MISSING_SHORT_ID})
        return response_400(SHORT_ID_NOT_PROVIDED)

    # 2- Acquire DAO
    try:
        dao = short_link_dao()
    except ConfigurationError:
        logger.exception('Failed to configure short link storage. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(FAILED_TO_REDIRECT)
    except DataStoreError:
        logger.exception('Short link storage is unreachable. Responding with 500.', extra={'event': DATABASE_ERROR})
        return response_500(FAILED_TO_REDIRECT)

    # 3- Look up original URL
    try:
        location = resolve_short_link(short_id, dao=dao)
    except ShortLinkNotFoundError:
        logger.info(
            'Short URL record not found in database. Responding with 404.',
            extra={'short_id': short_id, 'event': SHORT_URL_NOT_FOUND},
        )
        return response_404(SHORT_URL_NOT_FOUND_MESSAGE)
    except DataStoreError:
        logger.exception(
            'Failed to read short URL record. Responding with 500.',
            extra={'short_id': short_id, 'event': DATABASE_ERROR},
        )
        return response_500(FAILED_TO_REDIRECT)

    # 4- Redirect client to original URL
    logger.info(
        'Redirecting client to original URL. Responding with 302.',
        extra={'short_id': short_id, 'location': location, 'event': REDIRECT_SUCCESS},
    )
    return response_302(location=location)
