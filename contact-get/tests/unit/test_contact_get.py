"""
Unit tests for contact get Lambda function
"""
import json
import pytest


class TestContactGetLambdaHandler:
    """Test cases for contact get Lambda handler"""

    @pytest.fixture(autouse=True)
    def setup_app(self, mock_aws_services, load_app, contact_book, fixed):
        self.app = load_app('contact-get')
        contact_book.upsert('identity-a', b'\xaa' + b'\x00' * 999, fixed.blob(1000, 1))
        contact_book.upsert('identity-a', b'\xbb' + b'\x00' * 999, fixed.blob(1000, 2))
        contact_book.upsert('identity-b', b'\xcc' + b'\x00' * 999, fixed.blob(1000, 3))

    def test_single_contact(self, direct_event, lambda_context, fixed):
        result = self.app.lambda_handler(direct_event({'addr': '0xaa'}, caller='identity-a'), lambda_context)

        contact = result['data']['contact']
        assert contact['exists'] is True
        assert contact['name'] == fixed.hex(fixed.blob(1000, 1))

    def test_unknown_contact_is_zero(self, direct_event, lambda_context, fixed):
        result = self.app.lambda_handler(direct_event({'addr': '0xcc'}, caller='identity-a'), lambda_context)

        contact = result['data']['contact']
        assert contact['exists'] is False
        assert contact['name'] == fixed.hex(b'\x00' * 1000)

    def test_list_only_own_contacts(self, api_gateway_event, lambda_context):
        response = self.app.lambda_handler(api_gateway_event({}, caller='identity-a'), lambda_context)

        body = json.loads(response['body'])
        assert body['data']['count'] == 2
        assert {c['owner'] for c in body['data']['contacts']} == {'identity-a'}
