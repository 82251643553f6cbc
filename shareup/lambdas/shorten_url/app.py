import functools
import logging

from shareup.types import LambdaEvent, LambdaContext, LambdaResponse
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.factory import build_short_link_dao
from shareup.dao.exceptions import DataStoreError, ShortLinkCollisionError
from shareup.exceptions import ConfigurationError, ValidationError
from shareup.services import create_short_link, validate_original_url
from shareup.utils import load_config, app_prefix, base_url, guarantee_500_response
from shareup.utils.helpers import json_body
from shareup.utils.responses import response_200, response_400, response_500
from shareup.lambdas.shorten_url.constants import (
    INVALID_JSON_BODY,
    INVALID_PUBLIC_URL,
    SHORT_URL_CREATED,
    SHORT_ID_SPACE_EXHAUSTED,
    DATABASE_ERROR,
    CONFIGURATION_ERROR,
    DATABASE_ERROR_MESSAGE,
    FAILED_TO_CREATE_SHORT_URL,
)


logger = logging.getLogger(__name__)


@functools.cache
def short_link_dao() -> ShortLinkBaseDAO:
    """Build the short link DAO once per Lambda execution environment"""
    app_config = load_config('shorten_url')
    return build_short_link_dao(app_config, prefix=app_prefix())


@guarantee_500_response(FAILED_TO_CREATE_SHORT_URL)
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract and validate the public URL from the request body
    - Step 2: Acquire the (process-wide) short link DAO
    - Step 3: Generate a short ID and store the mapping (retrying on collisions)
    - Step 4: Respond to user with 200 success

    Input is validated before the data store is touched, so a missing URL is
    always reported as a 400 regardless of the data store's health.

    HTTP responses:
        200: Successful URL shortening
            shortUrl: newly generated short url
        400: Bad client request
            error: 'Invalid JSON body', 'Public URL not provided' or 'Public URL too long'
        500: Internal server error
            error: 'Database error' on data store failure
                   'Database error: <message>' when no free short ID was found
                   'Failed to create short URL' on any other failure

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        LambdaResponse:
            JSON-serializable response following API Gateway Lambda Proxy
            output format.

    Example:
        >>> event = {'body': '{"publicUrl": "https://files.example.com/public/cv.pdf"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['shortUrl']
        'http://localhost:3000/V1StGX'
    """
    # 1- Extract public URL from request body
    try:
        request_body = json_body(event)
    except ValidationError as e:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(str(e))

    try:
        public_url = validate_original_url(request_body.get('publicUrl'))
    except ValidationError as e:
        logger.info('Invalid public URL. Responding with 400.', extra={'event': INVALID_PUBLIC_URL, 'reason': str(e)})
        return response_400(str(e))

    # 2- Acquire DAO
    try:
        dao = short_link_dao()
    except ConfigurationError:
        logger.exception('Failed to configure short link storage. Responding with 500.', extra={'event': CONFIGURATION_ERROR})
        return response_500(FAILED_TO_CREATE_SHORT_URL)
    except DataStoreError:
        logger.exception('Short link storage is unreachable. Responding with 500.', extra={'event': DATABASE_ERROR})
        return response_500(DATABASE_ERROR_MESSAGE)

    # 3- Store short link
    try:
        short_url = create_short_link(public_url, dao=dao, base_url=base_url(event))
    except ShortLinkCollisionError as e:
        logger.error('Short ID space exhausted. Responding with 500.', extra={'event': SHORT_ID_SPACE_EXHAUSTED})
        return response_500(f'{DATABASE_ERROR_MESSAGE}: {e}')
    except DataStoreError:
        logger.exception('Failed to store short link. Responding with 500.', extra={'event': DATABASE_ERROR})
        return response_500(DATABASE_ERROR_MESSAGE)

    # 4- Return successful response to user
    logger.info(
        'Short URL created. Responding with 200.',
        extra={'event': SHORT_URL_CREATED, 'short_url': short_url, 'public_url': public_url},
    )
    return response_200({'shortUrl': short_url})
