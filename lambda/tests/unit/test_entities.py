"""
Unit Tests: HourRecord, WeatherBundle e ViewState
"""
from application.dtos.responses import ViewState
from domain.constants import View
from domain.entities.hour_record import HourRecord
from domain.entities.weather_bundle import WeatherBundle


class TestHourRecord:

    def test_to_api_response(self):
        hour = HourRecord(datetime='2024-01-01T10:00:00Z', temp=18.5, precipprob=30.0, conditions='Lluvia')

        assert hour.to_api_response() == {
            'datetime': '2024-01-01T10:00:00Z',
            'temp': 18.5,
            'precipprob': 30.0,
            'conditions': 'Lluvia'
        }

    def test_optional_fields_default_to_none(self):
        hour = HourRecord(datetime='2024-01-01T10:00:00Z')

        assert hour.temp is None
        assert hour.precipprob is None
        assert hour.conditions is None


class TestWeatherBundle:

    def test_empty_bundle(self):
        bundle = WeatherBundle()

        assert bundle.has_data is False
        assert bundle.to_api_response() == {
            'resolvedAddress': None,
            'timezone': None,
            'currentConditions': None,
            'hoursPrev24': [],
            'hoursNext24': []
        }

    def test_to_api_response_uses_camel_case(self, make_bundle):
        response = make_bundle().to_api_response()

        assert response['resolvedAddress'] == 'Medellín, Antioquia, Colombia'
        assert response['timezone'] == 'America/Bogota'
        assert response['currentConditions']['temp'] == 22.0
        assert response['hoursPrev24'][0]['datetime'] == '2024-01-01T10:00:00Z'
        assert response['hoursNext24'][0]['temp'] == 23.0

    def test_has_data_with_hours_only(self):
        bundle = WeatherBundle(hours_next_24=[HourRecord(datetime='2024-01-01T10:00:00Z')])

        assert bundle.has_data is True


class TestViewState:

    def test_defaults(self):
        state = ViewState()

        assert state.loading is False
        assert state.error is None
        assert state.has_data is False
        assert state.theme == View.THEME_LIGHT

    def test_api_response_hides_api_key(self, make_bundle):
        state = ViewState(query='Medellín', data=make_bundle(), api_key='SECRET')

        response = state.to_api_response()

        assert response['hasApiKey'] is True
        assert response['hasData'] is True
        assert 'SECRET' not in str(response)
        assert response['data']['resolvedAddress'] == 'Medellín, Antioquia, Colombia'
