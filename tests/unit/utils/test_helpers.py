"""Unit tests for Lambda helper utilities in helpers.py

Test coverage includes:

1. base_url()
   - Custom domains drop the stage; execute-api domains keep it unless it is $default or missing.
   - Host / X-Forwarded-Proto headers are used without a request context.
   - Falls back to http://localhost:3000.

2. normalize_url()

3. require_environment()
   - Passes when variables are set; lists every missing variable otherwise.

4. guarantee_500_response()
   - Converts unexpected exceptions to a JSON 500 outside SAM, re-raises locally.

5. json_body() and last_path_segment()
"""

import json
import base64

import pytest

from shareup.exceptions import MissingEnvironmentVariableError, ValidationError
from shareup.utils.helpers import (
    base_url,
    normalize_url,
    require_environment,
    guarantee_500_response,
    json_body,
    last_path_segment,
)


# -------------------------------
# 1. base_url()
# -------------------------------


@pytest.mark.parametrize(
    'event, expected',
    [
        ({'requestContext': {'domainName': 'share-up.example.com', 'stage': 'Prod'}}, 'https://share-up.example.com'),
        (
            {'requestContext': {'domainName': 'abc123.execute-api.us-east-1.amazonaws.com', 'stage': 'Prod'}},
            'https://abc123.execute-api.us-east-1.amazonaws.com/Prod',
        ),
        (
            {'requestContext': {'domainName': 'abc123.execute-api.us-east-1.amazonaws.com', 'stage': '$default'}},
            'https://abc123.execute-api.us-east-1.amazonaws.com',
        ),
        ({'requestContext': {'domainName': 'abc123.execute-api.us-east-1.amazonaws.com'}}, 'https://abc123.execute-api.us-east-1.amazonaws.com'),
        ({'headers': {'Host': 'share.local:8080', 'X-Forwarded-Proto': 'http'}}, 'http://share.local:8080'),
        ({'headers': {'host': 'share.example.org'}}, 'https://share.example.org'),
        ({'requestContext': None, 'headers': None}, 'http://localhost:3000'),
        ({}, 'http://localhost:3000'),
    ],
)
def test_base_url(event, expected):
    assert base_url(event) == expected


# -------------------------------
# 2. normalize_url()
# -------------------------------


@pytest.mark.parametrize(
    'url, expected',
    [
        ('example.com', 'https://example.com'),
        ('example.com/a?b=c', 'https://example.com/a?b=c'),
        ('http://example.com', 'http://example.com'),
        ('https://example.com', 'https://example.com'),
        ('HTTP://example.com', 'HTTP://example.com'),
        ('ftp://example.com', 'https://ftp://example.com'),
        ('httpsexample.com', 'https://httpsexample.com'),
    ],
)
def test_normalize_url(url, expected):
    assert normalize_url(url) == expected


# -------------------------------
# 3. require_environment()
# -------------------------------


@require_environment('SHAREUP_TEST_A', 'SHAREUP_TEST_B')
def _needs_env():
    return 'ok'


def test_require_environment(monkeypatch):
    monkeypatch.setenv('SHAREUP_TEST_A', 'a')
    monkeypatch.setenv('SHAREUP_TEST_B', 'b')
    assert _needs_env() == 'ok'


def test_require_environment_missing(monkeypatch):
    monkeypatch.delenv('SHAREUP_TEST_A', raising=False)
    monkeypatch.setenv('SHAREUP_TEST_B', '')

    with pytest.raises(MissingEnvironmentVariableError) as exc_info:
        _needs_env()

    assert str(exc_info.value) == "Missing required environment variables: 'SHAREUP_TEST_A', 'SHAREUP_TEST_B'"


# -------------------------------
# 4. guarantee_500_response()
# -------------------------------


@guarantee_500_response('Failed to redirect')
def _failing_handler(event, context):
    raise RuntimeError('boom')


@guarantee_500_response()
def _healthy_handler(event, context):
    return {'statusCode': 200, 'body': ''}


def test_guarantee_500_response(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'prod')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)

    response = _failing_handler({}, None)

    assert response['statusCode'] == 500
    assert response['headers'] == {'Content-Type': 'application/json'}
    assert json.loads(response['body']) == {'error': 'Failed to redirect'}


def test_guarantee_500_response_passes_through(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'prod')
    assert _healthy_handler({}, None) == {'statusCode': 200, 'body': ''}


def test_guarantee_500_response_reraises_locally(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'dev')
    monkeypatch.setenv('AWS_SAM_LOCAL', 'true')

    with pytest.raises(RuntimeError, match='boom'):
        _failing_handler({}, None)


# -------------------------------
# 5. json_body() and last_path_segment()
# -------------------------------


@pytest.mark.parametrize(
    'event, expected',
    [
        ({'body': '{"publicUrl": "https://example.com"}'}, {'publicUrl': 'https://example.com'}),
        ({'body': '  '}, {}),
        ({'body': None}, {}),
        ({}, {}),
        ({'body': '["https://example.com"]'}, {}),
        ({'body': '"https://example.com"'}, {}),
        ({'body': base64.b64encode(b'{"publicUrl": "x"}').decode(), 'isBase64Encoded': True}, {'publicUrl': 'x'}),
    ],
)
def test_json_body(event, expected):
    assert json_body(event) == expected


@pytest.mark.parametrize(
    'event',
    [
        {'body': '{"publicUrl": '},
        {'body': "{'publicUrl': 'x'}"},
        {'body': 'not-base64!', 'isBase64Encoded': True},
    ],
)
def test_json_body_invalid(event):
    with pytest.raises(ValidationError, match='Invalid JSON body'):
        json_body(event)


@pytest.mark.parametrize(
    'event, expected',
    [
        ({'path': '/V1StGX'}, 'V1StGX'),
        ({'rawPath': '/Prod/V1StGX/'}, 'V1StGX'),
        ({'path': '/'}, ''),
        ({}, ''),
    ],
)
def test_last_path_segment(event, expected):
    assert last_path_segment(event) == expected
