"""Interface for the blob store holding shared payloads (files, notes, code).

Uploaded objects are expected to be publicly readable: the URL returned by
public_url() is what gets shortened and shared.
"""

from abc import ABC, abstractmethod


class BlobStoreBase(ABC):
    """Interface for blob stores.

    Methods:
        upload(path: str, data: bytes, content_type: str) -> str:
            Store `data` under `path`. Returns the stored path.
            Raises BlobStoreError if the store rejects the upload.

        public_url(path: str) -> str:
            Return the public retrieval URL of a stored object.
    """

    @abstractmethod
    def upload(self, path: str, data: bytes, content_type: str) -> str:
        pass

    @abstractmethod
    def public_url(self, path: str) -> str:
        pass
