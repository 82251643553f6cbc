"""Runtime configuration for the Lambda handlers.

Connection settings for the mapping store live in a single AWS AppConfig
document per environment. The environment comes from `APP_ENV` and the
application from `APP_NAME`. Each handler reads only its own section, keyed
by the backend marked active:

    {
        "build": 7,
        "active_backend": "redis",
        "configs": {
            "shorten_url":  {"redis": {"host": "...", "port": 6379, "db": 0}},
            "redirect_url": {"redis": {"host": "...", "port": 6379, "db": 0}}
        }
    }

    >>> load_config('redirect_url')
    {'redis': {'host': '...', 'port': 6379, 'db': 0}}

Under `sam local`, when APPCONFIG_AGENT_URL points at a local AppConfig
agent, the document is read from that agent instead of the AppConfig API.
"""

import os
import json
import functools
import logging
import urllib.parse
import urllib.request
from collections.abc import Callable

import boto3

from shareup.constants import ENV
from shareup.exceptions import BadConfigurationError
from shareup.types import AppConfig, LambdaConfiguration
from shareup.utils.helpers import require_environment
from shareup.utils.runtime import running_locally


logger = logging.getLogger(__name__)

LOCAL_AGENT_HOSTS = frozenset({'localhost', '127.0.0.1', 'host.docker.internal'})
LOCAL_AGENT_PORTS = frozenset({2772, None})
LOCAL_AGENT_TIMEOUT_SECONDS = 5
DEFAULT_PROFILE_NAME = 'backend-config'


def app_env() -> str:
    """Lower-cased `APP_ENV`, 'local' when unset"""
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Key namespace for the DAOs: '<APP_NAME>:<APP_ENV>', or None without APP_NAME

    Example:
        >>> app_prefix()  # APP_NAME=shareup, APP_ENV=dev
        'shareup:dev'
    """
    name = app_name()
    return None if name is None else f'{name}:{app_env()}'


def select_function_config(document: AppConfig, function_name: str) -> LambdaConfiguration:
    """Cut one function's active-backend section out of the AppConfig document

    Raises:
        BadConfigurationError:
            If the document lacks the active backend or the function's section.
    """
    try:
        backend = document['active_backend']
        return {backend: document['configs'][function_name][backend]}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no '{function_name}' configuration for the active backend.") from e


def _validate_agent_url(url: str | None) -> str:
    """Accept only a local AppConfig agent URL ('' when unset)"""
    if not url:
        return ''
    parsed = urllib.parse.urlparse(url)
    if parsed.scheme not in {'http', 'https'}:
        raise BadConfigurationError(f'AppConfig agent URL must use http(s): {url}')
    if parsed.hostname not in LOCAL_AGENT_HOSTS:
        raise BadConfigurationError(f'AppConfig agent URL must point at a local host: {url}')
    if parsed.port not in LOCAL_AGENT_PORTS:
        raise BadConfigurationError(f'AppConfig agent URL must use port 2772: {url}')
    return url.rstrip('/')


def _sam_load_local_appconfig(func: Callable[[str], LambdaConfiguration]) -> Callable[[str], LambdaConfiguration]:
    """Decorator: under SAM, read the document from the local AppConfig agent

    The wrapped loader is used when not running locally or when
    APPCONFIG_AGENT_URL is unset. APPCONFIG_PROFILE_NAME selects the profile
    (default 'backend-config').
    """

    @functools.wraps(func)
    def wrapper(function_name: str) -> LambdaConfiguration:
        agent_url = _validate_agent_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not (running_locally() and agent_url):
            return func(function_name)

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, DEFAULT_PROFILE_NAME)
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'
        logger.debug('Loading AppConfig from local agent.', extra={'agent_url': url, 'function_name': function_name})

        with urllib.request.urlopen(url, timeout=LOCAL_AGENT_TIMEOUT_SECONDS) as response:  # noqa: S310
            document = json.load(response)

        return select_function_config(document, function_name)

    return wrapper


def _fetch_appconfig_document() -> AppConfig:
    appconfig = boto3.client('appconfigdata')
    token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']
    response = appconfig.get_latest_configuration(ConfigurationToken=token)
    return json.loads(response['Configuration'].read().decode('utf-8'))


@_sam_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(function_name: str) -> LambdaConfiguration:
    """Return the active-backend configuration of one Lambda function

    Requires APPCONFIG_APP_ID, APPCONFIG_ENV_ID and APPCONFIG_PROFILE_ID.
    Handlers call this once per execution environment (the DAO built from it
    is cached), so no AppConfig caching is done here.

    Args:
        function_name (str):
            'shorten_url' or 'redirect_url'.

    Raises:
        MissingEnvironmentVariableError:
            If an AppConfig identifier is not set.
        BadConfigurationError:
            If the document has no section for this function.
        botocore.exceptions.ClientError:
            If AppConfig rejects the request.
    """
    document = _fetch_appconfig_document()
    logger.debug('Loaded AppConfig document.', extra={'function_name': function_name, 'build': document.get('build')})
    return select_function_config(document, function_name)
