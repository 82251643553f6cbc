"""
Share a file, note or code snippet from the command line.

This CLI follows this procedure to share a payload:
- Step 1: Upload the payload to the S3 bucket
- Step 2: Shorten the object's public URL via the short URL API
- Step 3: Print the public URL, short URL and QR code URL

CLI usage:
    $ shareup file ./report.pdf
    $ shareup note "# Groceries"
    $ echo "print('hi')" | shareup code -
    $ shareup --api-url https://share-up.example.com --bucket shareup-files file ./cv.pdf

Configuration (flags override environment variables):
    SHAREUP_API_URL           – Base URL of the short URL API
    SHAREUP_BUCKET            – S3 bucket receiving uploads
    SHAREUP_BUCKET_REGION     – Optional bucket region
    SHAREUP_PUBLIC_BASE_URL   – Optional public URL base for uploaded objects
"""

import os
import sys
import argparse
from pathlib import Path

from shareup.constants import ENV, Limits
from shareup.client import ShortURLClient
from shareup.exceptions import ShareUpError, MissingEnvironmentVariableError
from shareup.share import ShareService, ShareResult
from shareup.storage import S3BlobStore


def _read_text(value: str) -> str:
    return sys.stdin.read() if value == '-' else value


def _read_source(value: str) -> str:
    return sys.stdin.read() if value == '-' else Path(value).read_text(encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='shareup', description='Upload a payload and print a short link and QR code for it')
    parser.add_argument('--api-url', default=os.getenv(ENV.Share.API_URL), help=f'Short URL API base URL (env: {ENV.Share.API_URL})')
    parser.add_argument('--bucket', default=os.getenv(ENV.Share.BUCKET), help=f'S3 bucket for uploads (env: {ENV.Share.BUCKET})')
    parser.add_argument('--region', default=os.getenv(ENV.Share.BUCKET_REGION), help='S3 bucket region')
    parser.add_argument('--public-base-url', default=os.getenv(ENV.Share.PUBLIC_BASE_URL), help='Public URL base for uploaded objects')
    parser.add_argument('--timeout', type=float, default=Limits.CLIENT_TIMEOUT_SECONDS, help='Short URL API timeout in seconds (default: 10)')

    subparsers = parser.add_subparsers(dest='kind', required=True)
    file_parser = subparsers.add_parser('file', help='Share a file')
    file_parser.add_argument('path', type=Path)
    note_parser = subparsers.add_parser('note', help='Share a markdown note')
    note_parser.add_argument('text', help="Note text, or '-' to read stdin")
    code_parser = subparsers.add_parser('code', help='Share a code snippet')
    code_parser.add_argument('source', help="Path to a source file, or '-' to read stdin")
    return parser


def share(args: argparse.Namespace, service: ShareService) -> ShareResult:
    if args.kind == 'file':
        return service.share_file(args.path)
    if args.kind == 'note':
        return service.share_note(_read_text(args.text))
    return service.share_code(_read_source(args.source))


def build_service(args: argparse.Namespace) -> ShareService:
    missing = [name for name, value in ((ENV.Share.API_URL, args.api_url), (ENV.Share.BUCKET, args.bucket)) if not value]
    if missing:
        raise MissingEnvironmentVariableError(f'Missing required settings: {", ".join(missing)}')

    blob_store = S3BlobStore(bucket=args.bucket, region=args.region, public_base_url=args.public_base_url)
    return ShareService(blob_store, ShortURLClient(args.api_url, timeout=args.timeout))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        result = share(args, build_service(args))
    except (ShareUpError, OSError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1

    print(f'Public URL: {result.public_url}')
    print(f'Short URL:  {result.short_url}')
    print(f'QR code:    {result.qr_code_url}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
