"""Unit tests for the shareup CLI

Test coverage includes:

1. Argument parsing
   - Flags default to SHAREUP_* environment variables.

2. Dispatch
   - file, note and code subcommands reach the matching ShareService method.
   - '-' reads the payload from stdin.

3. main()
   - Prints the share result and exits 0.
   - Prints an error and exits 1 on missing settings or share failures.
"""

import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from shareup import cli
from shareup.exceptions import ShortURLTransportError
from shareup.share import ShareResult, ShareService


RESULT = ShareResult(
    public_url='https://shareup-files.s3.amazonaws.com/note-1760529600000.md',
    short_url='https://share-up.example.com/V1StGX',
    qr_code_url='https://api.qrserver.com/v1/create-qr-code/?size=200x200&data=https%3A%2F%2Fshare-up.example.com%2FV1StGX',
)


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    monkeypatch.setenv('SHAREUP_API_URL', 'https://share-up.example.com')
    monkeypatch.setenv('SHAREUP_BUCKET', 'shareup-files')
    monkeypatch.delenv('SHAREUP_BUCKET_REGION', raising=False)
    monkeypatch.delenv('SHAREUP_PUBLIC_BASE_URL', raising=False)


@pytest.fixture
def service():
    _service = MagicMock(spec=ShareService)
    _service.share_file.return_value = RESULT
    _service.share_note.return_value = RESULT
    _service.share_code.return_value = RESULT
    return _service


# -------------------------------
# 1. Argument parsing
# -------------------------------


def test_build_parser_env_defaults():
    args = cli.build_parser().parse_args(['note', 'hello'])

    assert args.api_url == 'https://share-up.example.com'
    assert args.bucket == 'shareup-files'
    assert args.region is None
    assert args.timeout == 10.0
    assert (args.kind, args.text) == ('note', 'hello')


def test_build_parser_flags_override_env():
    args = cli.build_parser().parse_args(['--api-url', 'http://localhost:3000', '--bucket', 'other', '--region', 'eu-central-1', 'file', 'cv.pdf'])

    assert args.api_url == 'http://localhost:3000'
    assert args.bucket == 'other'
    assert args.region == 'eu-central-1'
    assert args.path == Path('cv.pdf')


def test_build_parser_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


# -------------------------------
# 2. Dispatch
# -------------------------------


def test_share_file(service):
    cli.share(cli.build_parser().parse_args(['file', 'cv.pdf']), service)
    service.share_file.assert_called_once_with(Path('cv.pdf'))


def test_share_note(service):
    cli.share(cli.build_parser().parse_args(['note', '# Groceries']), service)
    service.share_note.assert_called_once_with('# Groceries')


def test_share_note_from_stdin(monkeypatch, service):
    monkeypatch.setattr(cli.sys, 'stdin', io.StringIO('# From stdin\n'))
    cli.share(cli.build_parser().parse_args(['note', '-']), service)
    service.share_note.assert_called_once_with('# From stdin\n')


def test_share_code_from_file(service, tmp_path):
    source = tmp_path / 'hello.py'
    source.write_text("print('hi')\n", encoding='utf-8')

    cli.share(cli.build_parser().parse_args(['code', str(source)]), service)

    service.share_code.assert_called_once_with("print('hi')\n")


# -------------------------------
# 3. main()
# -------------------------------


def test_main(monkeypatch, capsys, service):
    monkeypatch.setattr(cli, 'build_service', lambda args: service)

    assert cli.main(['note', '# Groceries']) == 0

    out = capsys.readouterr().out
    assert RESULT.public_url in out
    assert RESULT.short_url in out
    assert RESULT.qr_code_url in out


def test_build_service(monkeypatch):
    s3_blob_store = MagicMock()
    monkeypatch.setattr(cli, 'S3BlobStore', s3_blob_store)

    service = cli.build_service(cli.build_parser().parse_args(['--timeout', '3', 'note', 'x']))

    s3_blob_store.assert_called_once_with(bucket='shareup-files', region=None, public_base_url=None)
    assert service.short_url_client.endpoint == 'https://share-up.example.com/api/short-url'
    assert service.short_url_client.timeout == 3.0


def test_main_missing_settings(monkeypatch, capsys):
    monkeypatch.delenv('SHAREUP_BUCKET')

    assert cli.main(['note', '# Groceries']) == 1
    assert 'SHAREUP_BUCKET' in capsys.readouterr().err


def test_main_share_failure(monkeypatch, capsys, service):
    service.share_note.side_effect = ShortURLTransportError('Short URL service timed out after 10s')
    monkeypatch.setattr(cli, 'build_service', lambda args: service)

    assert cli.main(['note', '# Groceries']) == 1
    assert capsys.readouterr().err == 'error: Short URL service timed out after 10s\n'


def test_main_unreadable_file(monkeypatch, capsys, service):
    service.share_file.side_effect = FileNotFoundError(2, 'No such file or directory')
    monkeypatch.setattr(cli, 'build_service', lambda args: service)

    assert cli.main(['file', 'missing.pdf']) == 1
    assert capsys.readouterr().err.startswith('error: ')
