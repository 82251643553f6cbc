from shareup.utils.config import app_env, app_name, app_prefix, load_config
from shareup.utils.helpers import base_url, normalize_url, require_environment, guarantee_500_response
from shareup.utils.shortener import generate_short_id
from shareup.utils.logging import initialize_logging


__all__ = [
    'generate_short_id',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'base_url',
    'normalize_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
