"""
Unit tests for get_member Lambda
"""

import json
from datetime import date
from unittest.mock import Mock

import pytest

from api.lambdas.get_member.handler import lambda_handler
from ingestion.lib.congress_api_client import (
    CongressAPINotFoundError,
    CongressAPIUnavailableError,
)


def event(bioguide_id='P000197'):
    return {'pathParameters': {'bioguide_id': bioguide_id} if bioguide_id else None}


def body_of(response):
    return json.loads(response['body'])


@pytest.fixture
def client(member_factory):
    client = Mock()
    client.get_member.return_value = {'member': member_factory()}
    return client


class TestGetMember:
    """Test the GET /v1/members/{bioguide_id} handler."""

    def test_success(self, sample_env, mock_lambda_context, placeholders, client):
        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 200
        body = body_of(response)
        assert body['member']['id'] == 'P000197'
        assert body['member']['chamber'] == 'House'
        assert body['source'] == 'congress.gov/member/P000197'
        assert 'timestamp' in body
        client.get_member.assert_called_once_with('P000197')

    def test_tenure_from_detail_payload(
        self, sample_env, mock_lambda_context, placeholders, client, detail_factory
    ):
        client.get_member.return_value = detail_factory()

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        member = body_of(response)['member']
        assert response['statusCode'] == 200
        assert member['yearsInOffice'] == date.today().year - 1987
        assert member['district'] == '11'
        assert member['name'] == 'Nancy Pelosi'

    def test_missing_id(self, sample_env, mock_lambda_context, placeholders, client):
        response = lambda_handler(event(None), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 400
        assert body_of(response)['error'] == 'BadRequest'
        client.get_member.assert_not_called()

    def test_missing_api_key(self, monkeypatch, mock_lambda_context, placeholders, client):
        monkeypatch.delenv('CONGRESS_API_KEY', raising=False)

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 500
        assert body_of(response)['error'] == 'ConfigurationError'
        client.get_member.assert_not_called()

    def test_invalid_log_level(self, sample_env, monkeypatch, mock_lambda_context, placeholders, client):
        monkeypatch.setenv('LOG_LEVEL', 'verbose')

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 500
        assert body_of(response)['error'] == 'ConfigurationError'
        client.get_member.assert_not_called()

    def test_not_found(self, sample_env, mock_lambda_context, placeholders, client):
        client.get_member.side_effect = CongressAPINotFoundError('Resource not found')

        response = lambda_handler(event('C999999'), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 404
        assert body_of(response)['error'] == 'NotFound'

    def test_no_term_data(self, sample_env, mock_lambda_context, placeholders, client, member_factory):
        client.get_member.return_value = {'member': member_factory(terms=[])}

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 404

    def test_upstream_unavailable(self, sample_env, mock_lambda_context, placeholders, client):
        client.get_member.side_effect = CongressAPIUnavailableError('timed out')

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 502
        assert body_of(response)['error'] == 'UpstreamUnavailable'

    def test_internal_error(self, sample_env, mock_lambda_context, placeholders, client):
        client.get_member.side_effect = RuntimeError('boom')

        response = lambda_handler(event(), mock_lambda_context, placeholders, client)

        assert response['statusCode'] == 500
        assert body_of(response)['error'] == 'InternalServerError'
