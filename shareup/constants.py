import string
from enum import StrEnum


class ShortID:
    """Short identifier generation defaults."""

    ALPHABET = string.ascii_letters + string.digits + '-_'  # URL-safe, 64 symbols
    LENGTH = 6
    MAX_ATTEMPTS = 3  # Total insert attempts before giving up on collisions


class Limits:
    """Request limits and timeouts."""

    MAX_URL_LENGTH = 2048
    STORE_TIMEOUT_SECONDS = 5.0  # Redis socket (connect) timeout
    CLIENT_TIMEOUT_SECONDS = 10.0  # Short URL API call made by ShortURLClient


class QRCode:
    """External QR code rendering service."""

    SERVICE_URL = 'https://api.qrserver.com/v1/create-qr-code/'
    SIZE = 200


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'

    class Share(StrEnum):
        API_URL = 'SHAREUP_API_URL'
        BUCKET = 'SHAREUP_BUCKET'
        BUCKET_REGION = 'SHAREUP_BUCKET_REGION'
        PUBLIC_BASE_URL = 'SHAREUP_PUBLIC_BASE_URL'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
