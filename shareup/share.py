"""Share flow: upload a payload, shorten its public URL, attach a QR code.

Example:
    >>> service = ShareService(S3BlobStore(bucket='shareup-files'), ShortURLClient('https://share-up.example.com'))
    >>> result = service.share_note('# Groceries\\n- milk')
    >>> result.short_url
    'https://share-up.example.com/V1StGX'
"""

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path

from shareup.client import ShortURLClient
from shareup.exceptions import ValidationError
from shareup.qr import qr_code_url
from shareup.storage import BlobStoreBase, note_object_name, code_object_name, file_object_name


logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = 'application/octet-stream'


@dataclass(frozen=True)
class ShareResult:
    public_url: str    # Blob store URL of the uploaded payload
    short_url: str     # Short link redirecting to public_url
    qr_code_url: str   # QR code image encoding short_url


class ShareService:
    def __init__(self, blob_store: BlobStoreBase, short_url_client: ShortURLClient):
        self.blob_store = blob_store
        self.short_url_client = short_url_client

    def share_file(self, path: str | Path) -> ShareResult:
        path = Path(path)
        content_type = mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE
        return self._share(file_object_name(path.name), path.read_bytes(), content_type)

    def share_note(self, text: str) -> ShareResult:
        if not text.strip():
            raise ValidationError('Note cannot be empty.')
        return self._share(note_object_name(), text.encode('utf-8'), 'text/markdown')

    def share_code(self, code: str) -> ShareResult:
        if not code.strip():
            raise ValidationError('Code cannot be empty.')
        return self._share(code_object_name(), code.encode('utf-8'), 'text/plain')

    def _share(self, object_name: str, data: bytes, content_type: str) -> ShareResult:
        stored_path = self.blob_store.upload(object_name, data, content_type)
        public_url = self.blob_store.public_url(stored_path)
        short_url = self.short_url_client.generate(public_url)
        logger.info('Shared payload.', extra={'path': stored_path, 'short_url': short_url})
        return ShareResult(public_url=public_url, short_url=short_url, qr_code_url=qr_code_url(short_url))
