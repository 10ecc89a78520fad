"""Tests for the Parameter Store source and client construction."""

from unittest.mock import MagicMock, patch

import pytest
from botocore.config import Config
from botocore.exceptions import NoRegionError, ProfileNotFound

from parameter_store_config.errors import InvalidArgumentError
from parameter_store_config.parameter_store import (
    AWSCredentials,
    ParameterStoreProvider,
    ParameterStoreSource,
    build_client_config,
    create_ssm_client,
)
from parameter_store_config.settings import ParameterStoreSettings


class TestParameterStoreSource:

    def test_root_path_required(self, ssm_client):
        with pytest.raises(InvalidArgumentError):
            ParameterStoreSource('', client=ssm_client)

    def test_root_path_checked_before_client_creation(self):
        with patch('boto3.Session') as mock_session:
            with pytest.raises(InvalidArgumentError):
                ParameterStoreSource(None, region='us-east-1')
        mock_session.assert_not_called()

    def test_build_returns_wired_provider(self, ssm_client):
        factory = MagicMock()
        source = ParameterStoreSource(
            '/app',
            client=ssm_client,
            parse_string_list_as_list=True,
            fail_if_cant_load=True,
            logger_factory=factory,
        )

        provider = source.build(builder=None)

        assert isinstance(provider, ParameterStoreProvider)
        assert provider.client is ssm_client
        assert provider.root_path == '/app'
        assert provider.parse_string_list_as_list is True
        assert provider.fail_if_cant_load is True
        assert provider.logger is factory.return_value

    def test_build_creates_independent_providers(self, ssm_client, stub_pages, make_response):
        stub_pages(ssm_client, make_response([('/app/a', '1', 'String')]))
        source = ParameterStoreSource('/app', client=ssm_client)

        first = source.build()
        second = source.build()
        first.load()

        assert first is not second
        assert first.client is second.client
        assert first.data == {'app:a': '1'}
        assert second.data == {}

    def test_no_requests_until_load(self, ssm_client):
        source = ParameterStoreSource('/app', client=ssm_client)
        source.build()

        ssm_client.get_paginator.assert_not_called()

    def test_creates_client_for_region(self):
        with patch('boto3.Session') as mock_session:
            source = ParameterStoreSource('/app', region='eu-west-1')

        mock_session.assert_called_once_with()
        mock_session.return_value.client.assert_called_once_with('ssm', region_name='eu-west-1')
        assert source.client is mock_session.return_value.client.return_value

    def test_creates_client_with_credentials(self):
        credentials = AWSCredentials('AKIAEXAMPLE', 'secret-key', 'session-token')

        with patch('boto3.Session') as mock_session:
            ParameterStoreSource('/app', region='us-east-1', credentials=credentials)

        mock_session.return_value.client.assert_called_once_with(
            'ssm',
            region_name='us-east-1',
            aws_access_key_id='AKIAEXAMPLE',
            aws_secret_access_key='secret-key',
            aws_session_token='session-token',
        )

    def test_creates_client_with_profile(self):
        with patch('boto3.Session') as mock_session:
            ParameterStoreSource('/app', region='us-east-1', profile='dev')

        mock_session.assert_called_once_with(profile_name='dev')

    def test_client_construction_failure(self):
        with patch('boto3.Session') as mock_session:
            mock_session.return_value.client.side_effect = NoRegionError()

            with pytest.raises(InvalidArgumentError) as exc_info:
                ParameterStoreSource('/app')

        assert isinstance(exc_info.value.__cause__, NoRegionError)

    def test_unknown_profile(self):
        with patch('boto3.Session') as mock_session:
            mock_session.side_effect = ProfileNotFound(profile='missing')

            with pytest.raises(InvalidArgumentError):
                ParameterStoreSource('/app', profile='missing')

    def test_from_settings(self):
        settings = ParameterStoreSettings(
            root_path='/app/prod',
            region='us-west-2',
            parse_string_list_as_list=True,
            max_attempts=3,
        )

        with patch('boto3.Session') as mock_session:
            source = ParameterStoreSource.from_settings(settings)

        assert source.root_path == '/app/prod'
        assert source.parse_string_list_as_list is True
        assert source.fail_if_cant_load is False

        _, kwargs = mock_session.return_value.client.call_args
        assert kwargs['region_name'] == 'us-west-2'
        assert isinstance(kwargs['config'], Config)
        assert kwargs['config'].retries == {'max_attempts': 3, 'mode': 'standard'}

    def test_from_settings_with_client(self, ssm_client):
        settings = ParameterStoreSettings(root_path='/app')

        with patch('boto3.Session') as mock_session:
            source = ParameterStoreSource.from_settings(settings, client=ssm_client)

        mock_session.assert_not_called()
        assert source.client is ssm_client


class TestClient:

    def test_real_client_is_built_offline(self):
        client = create_ssm_client(
            region='us-east-1',
            credentials=AWSCredentials('AKIAEXAMPLE', 'secret-key'),
        )

        assert client.meta.region_name == 'us-east-1'
        assert client.meta.service_model.service_name == 'ssm'

    def test_credentials_repr_hides_secrets(self):
        credentials = AWSCredentials('AKIAEXAMPLE', 'secret-key', 'session-token')

        assert 'secret-key' not in repr(credentials)
        assert 'session-token' not in repr(credentials)
        assert 'aws_session_token' not in AWSCredentials('a', 'b').to_client_kwargs()

    def test_build_client_config(self):
        assert build_client_config() is None

        config = build_client_config(max_attempts=5, connect_timeout=2, read_timeout=4)
        assert config.retries == {'max_attempts': 5, 'mode': 'standard'}
        assert config.connect_timeout == 2
        assert config.read_timeout == 4
