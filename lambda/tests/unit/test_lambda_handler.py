"""
Unit Tests: Lambda Handler HTTP (rotas, API key e mapeamento de erros)
"""
import json
from typing import Dict, Optional
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from domain.constants import Messages
from domain.exceptions import (
    InvalidLocationException,
    QuotaExceededException,
    WeatherProviderException
)
from infrastructure.adapters.input.lambda_handler import lambda_handler

PROVIDER_FACTORY_PATH = 'infrastructure.adapters.input.lambda_handler.get_visualcrossing_provider'
SETTINGS_PATH = 'infrastructure.adapters.input.lambda_handler.settings'


class MockContext:
    """Mock do Lambda Context"""
    function_name = 'weather-current-api'
    function_version = '$LATEST'
    invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:weather-current-api'
    memory_limit_in_mb = '256'
    aws_request_id = 'test-request-id'
    log_group_name = '/aws/lambda/weather-current-api'
    log_stream_name = '2024/01/01/[$LATEST]test'

    def get_remaining_time_in_millis(self):
        return 30000


def build_event(
    path: str,
    query_parameters: Optional[Dict[str, str]] = None,
    headers: Optional[Dict[str, str]] = None
) -> dict:
    return {
        'resource': path,
        'path': path,
        'httpMethod': 'GET',
        'headers': {'Accept': 'application/json', **(headers or {})},
        'pathParameters': None,
        'queryStringParameters': query_parameters,
        'body': None,
        'isBase64Encoded': False,
        'requestContext': {
            'resourcePath': path,
            'httpMethod': 'GET',
            'path': path,
            'stage': 'test',
            'identity': {'sourceIp': '127.0.0.1'}
        }
    }


@pytest.fixture
def mock_context():
    return MockContext()


@pytest.fixture
def provider(make_bundle):
    mock = MagicMock()
    mock.fetch_by_query = AsyncMock(return_value={'resolvedAddress': 'Medellín'})
    mock.fetch_by_coordinates = AsyncMock(return_value={'resolvedAddress': '6.2442,-75.5812'})
    mock.normalize = MagicMock(return_value=make_bundle())
    with patch(PROVIDER_FACTORY_PATH, return_value=mock):
        yield mock


class TestWeatherRoute:

    def test_success_with_header_key(self, provider, mock_context):
        event = build_event(
            '/api/weather',
            {'location': 'Medellín'},
            {'X-Weather-Api-Key': 'HEADER_KEY'}
        )

        response = lambda_handler(event, mock_context)

        assert response['statusCode'] == 200
        body = json.loads(response['body'])
        assert body['resolvedAddress'] == 'Medellín, Antioquia, Colombia'
        assert len(body['hoursPrev24']) == 1
        assert len(body['hoursNext24']) == 1
        provider.fetch_by_query.assert_awaited_once_with('Medellín', 'HEADER_KEY')

    def test_header_name_is_case_insensitive(self, provider, mock_context):
        event = build_event('/api/weather', {'location': 'Cali'}, {'x-weather-api-key': 'lower'})

        lambda_handler(event, mock_context)

        provider.fetch_by_query.assert_awaited_once_with('Cali', 'lower')

    def test_falls_back_to_environment_key(self, provider, mock_context):
        with patch(SETTINGS_PATH) as settings:
            settings.WEATHER_API_KEY = 'ENV_KEY'
            response = lambda_handler(build_event('/api/weather', {'location': 'Cali'}), mock_context)

        assert response['statusCode'] == 200
        provider.fetch_by_query.assert_awaited_once_with('Cali', 'ENV_KEY')

    def test_invalid_location_returns_400(self, provider, mock_context):
        provider.fetch_by_query.side_effect = InvalidLocationException('Location must not be empty')

        response = lambda_handler(build_event('/api/weather', None, {'X-Weather-Api-Key': 'K'}), mock_context)

        assert response['statusCode'] == 400
        assert json.loads(response['body'])['type'] == 'InvalidLocationException'

    def test_quota_exceeded_returns_429(self, provider, mock_context):
        provider.fetch_by_query.side_effect = QuotaExceededException('raw body')

        response = lambda_handler(
            build_event('/api/weather', {'location': 'Cali'}, {'X-Weather-Api-Key': 'K'}),
            mock_context
        )

        assert response['statusCode'] == 429
        assert json.loads(response['body'])['message'] == Messages.QUOTA_EXCEEDED

    def test_provider_error_returns_502(self, provider, mock_context):
        provider.fetch_by_query.side_effect = WeatherProviderException('Invalid location', status_code=400)

        response = lambda_handler(
            build_event('/api/weather', {'location': '???'}, {'X-Weather-Api-Key': 'K'}),
            mock_context
        )

        assert response['statusCode'] == 502
        body = json.loads(response['body'])
        assert body['message'] == 'Invalid location'
        assert body['providerStatus'] == 400


class TestCoordinatesRoute:

    def test_success(self, provider, mock_context):
        event = build_event(
            '/api/weather/coordinates',
            {'lat': '6.2442', 'lng': '-75.5812'},
            {'X-Weather-Api-Key': 'K'}
        )

        response = lambda_handler(event, mock_context)

        assert response['statusCode'] == 200
        provider.fetch_by_coordinates.assert_awaited_once_with(6.2442, -75.5812, 'K')

    def test_invalid_latitude_returns_400(self, provider, mock_context):
        event = build_event(
            '/api/weather/coordinates',
            {'lat': 'north', 'lng': '-75.5812'},
            {'X-Weather-Api-Key': 'K'}
        )

        response = lambda_handler(event, mock_context)

        assert response['statusCode'] == 400
        provider.fetch_by_coordinates.assert_not_awaited()


class TestHealthRoute:

    def test_health(self, mock_context):
        response = lambda_handler(build_event('/health'), mock_context)

        assert response['statusCode'] == 200
        body = json.loads(response['body'])
        assert body['status'] == 'healthy'
        assert body['service'] == 'weather-current'
