"""S3-backed blob store.

Example:
    >>> store = S3BlobStore(bucket='shareup-files', region='eu-central-1')
    >>> path = store.upload('note-1760529600000.md', b'# Hello', 'text/markdown')
    >>> store.public_url(path)
    'https://shareup-files.s3.eu-central-1.amazonaws.com/note-1760529600000.md'
"""

import logging
from urllib.parse import quote

import boto3
from botocore.client import BaseClient
from botocore.exceptions import BotoCoreError, ClientError

from shareup.exceptions import BlobStoreError
from shareup.storage.base import BlobStoreBase


logger = logging.getLogger(__name__)


class S3BlobStore(BlobStoreBase):
    """Blob store writing objects to a (publicly readable) S3 bucket

    Args:
        bucket (str):
            Bucket name.
        region (str | None):
            Bucket region, used to build virtual-hosted-style public URLs.
        public_base_url (str | None):
            Overrides the public URL base (e.g. a CloudFront distribution).
        cache_control (str):
            Cache-Control header stored with each object.
        client (BaseClient | None):
            Pre-initialized S3 client. If None, a new client is created.
    """

    def __init__(
        self,
        bucket: str,
        region: str | None = None,
        public_base_url: str | None = None,
        cache_control: str = 'max-age=3600',
        client: BaseClient | None = None,
    ):
        self.bucket = bucket
        self.region = region
        self.public_base_url = public_base_url.rstrip('/') if public_base_url else None
        self.cache_control = cache_control
        self.s3 = client if client is not None else boto3.client('s3', region_name=region)

    def upload(self, path: str, data: bytes, content_type: str) -> str:
        try:
            self.s3.put_object(
                Bucket=self.bucket,
                Key=path,
                Body=data,
                ContentType=content_type,
                CacheControl=self.cache_control,
            )
        except (ClientError, BotoCoreError) as e:
            raise BlobStoreError(f"Failed to upload '{path}' to bucket '{self.bucket}'.") from e

        logger.debug('Uploaded object to S3.', extra={'bucket': self.bucket, 'path': path, 'size': len(data)})
        return path

    def public_url(self, path: str) -> str:
        key = quote(path)
        if self.public_base_url:
            return f'{self.public_base_url}/{key}'
        if self.region:
            return f'https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}'
        return f'https://{self.bucket}.s3.amazonaws.com/{key}'
