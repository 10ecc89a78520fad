"""Shared fixtures for Parameter Store tests."""

from unittest.mock import MagicMock

import boto3
import pytest
from botocore.stub import Stubber


def _make_response(parameters, next_token=None):
    response = {
        'Parameters': [
            {'Name': name, 'Value': value, 'Type': param_type}
            for name, value, param_type in parameters
        ]
    }
    if next_token is not None:
        response['NextToken'] = next_token
    return response


def _iter_pages(pages):
    for page in pages:
        if isinstance(page, Exception):
            raise page
        yield page


def _stub_pages(client, *pages):
    """Make every paginate() call on ``client`` yield ``pages``; exceptions are raised in place."""
    client.get_paginator.return_value.paginate.side_effect = lambda **kwargs: _iter_pages(pages)
    return client


@pytest.fixture
def make_response():
    """Build a GetParametersByPath response from (name, value, type) tuples."""
    return _make_response


@pytest.fixture
def stub_pages():
    return _stub_pages


@pytest.fixture
def ssm_client():
    """SSM client stub whose paginator yields a single empty page by default."""
    return _stub_pages(MagicMock(), _make_response([]))


@pytest.fixture
def stubbed_ssm():
    """Real SSM client with botocore's Stubber attached; no request leaves the process."""
    client = boto3.client(
        'ssm',
        region_name='us-east-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )
    with Stubber(client) as stubber:
        yield client, stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove environment variables that feed into settings."""
    for name in (
        'PARAMETER_STORE_ROOT_PATH',
        'PARAMETER_STORE_REGION',
        'PARAMETER_STORE_PROFILE',
        'PARAMETER_STORE_PARSE_STRING_LIST_AS_LIST',
        'PARAMETER_STORE_FAIL_IF_CANT_LOAD',
        'PARAMETER_STORE_MAX_ATTEMPTS',
        'PARAMETER_STORE_CONNECT_TIMEOUT',
        'PARAMETER_STORE_READ_TIMEOUT',
        'AWS_REGION',
        'AWS_DEFAULT_REGION',
    ):
        monkeypatch.delenv(name, raising=False)
