from shareup.storage.base import BlobStoreBase
from shareup.storage.s3_blob_store import S3BlobStore
from shareup.storage.naming import note_object_name, code_object_name, file_object_name


__all__ = [
    'BlobStoreBase',
    'S3BlobStore',
    'note_object_name',
    'code_object_name',
    'file_object_name',
]
