"""
Unit tests for contact remove Lambda function
"""
import pytest
from unittest.mock import MagicMock

from signal_registry.exceptions import DynamoDBError
from signal_registry.services.service_container import register_service


class TestContactRemoveLambdaHandler:
    """Test cases for contact remove Lambda handler"""

    @pytest.fixture(autouse=True)
    def setup_app(self, load_app):
        self.app = load_app('contact-remove')

    def test_remove_existing(self, mock_aws_services, direct_event, lambda_context, contact_book, fixed):
        addr = b'\xaa' + b'\x00' * 999
        contact_book.upsert('identity-alice', addr, fixed.blob(1000, 1))

        result = self.app.lambda_handler(direct_event({'addr': '0xaa'}), lambda_context)

        assert result['success'] is True
        assert result['data']['removed'] == fixed.hex(addr)
        assert not contact_book.contains('identity-alice', addr)

    def test_remove_absent_succeeds(self, mock_aws_services, direct_event, lambda_context):
        result = self.app.lambda_handler(direct_event({'addr': '0xbb'}), lambda_context)

        assert result['success'] is True

    def test_storage_failure_is_retryable(self, direct_event, lambda_context):
        contact_book = MagicMock()
        contact_book.remove.side_effect = DynamoDBError(
            'Service temporarily unavailable', 'remove_contact', 'Contact-test', retryable=True
        )
        register_service('contact_book', contact_book)

        result = self.app.lambda_handler(direct_event({'addr': '0xaa'}), lambda_context)

        assert result['success'] is False
        assert result['error']['code'] == 'DYNAMODB_ERROR'
        assert result['error']['retryable'] is True

    def test_missing_addr(self, direct_event, lambda_context):
        result = self.app.lambda_handler(direct_event({}), lambda_context)

        assert result['error']['code'] == 'VALIDATION_ERROR'
