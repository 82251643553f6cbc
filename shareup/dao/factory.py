"""Build the short link DAO selected by the application's configuration.

The configuration is the per-function section returned by load_config(), i.e.
a single-key mapping of the active backend to its connection parameters:

    {
        "redis": {"host": "...", "port": 6379, "db": 0}
    }
"""

import logging

from shareup.types import LambdaConfiguration
from shareup.dao.base import ShortLinkBaseDAO
from shareup.dao.redis import ShortLinkRedisDAO
from shareup.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def build_short_link_dao(app_config: LambdaConfiguration, prefix: str | None = None) -> ShortLinkBaseDAO:
    """Construct the short link DAO for the active backend

    Args:
        app_config (LambdaConfiguration):
            Per-function configuration as returned by load_config().
        prefix (str | None):
            Namespace prefix for all stored keys, e.g. 'shareup:dev'.

    Returns:
        ShortLinkBaseDAO: ready-to-use DAO (connectivity already verified).

    Raises:
        BadConfigurationError:
            If no backend or an unsupported backend is configured.
        DataStoreError:
            If the backend is unreachable.
    """
    if len(app_config) != 1:
        raise BadConfigurationError(f'Expected exactly one active backend (given: {sorted(app_config)}).')

    backend, backend_config = next(iter(app_config.items()))
    if backend == 'redis':
        logger.debug('Using Redis as the backend database for short links.')
        redis_config = {f'redis_{k}': v for k, v in backend_config.items()}
        return ShortLinkRedisDAO(**redis_config, prefix=prefix)

    raise BadConfigurationError(f"Unsupported short link backend '{backend}'.")
