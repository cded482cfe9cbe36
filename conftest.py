"""
Pytest configuration and fixtures for signal-registry tests
Provides AWS mocking, Lambda events and fixed-width test values
"""
import importlib.util
import json
import os
import pytest
import boto3
from moto import mock_aws
from unittest.mock import MagicMock


# Set test environment variables (before any signal_registry import)
os.environ.update({
    'AWS_DEFAULT_REGION': 'us-east-1',
    'AWS_ACCESS_KEY_ID': 'testing',
    'AWS_SECRET_ACCESS_KEY': 'testing',
    'AWS_SECURITY_TOKEN': 'testing',
    'AWS_SESSION_TOKEN': 'testing',
    'ENVIRONMENT': 'test',
    'PARAMETER_STORE_ENABLED': 'false',
    'IDENTITY_TABLE_NAME': 'IdentityRecord-test',
    'IDENTITY_NICKNAME_TABLE_NAME': 'NicknameBinding-test',
    'CONTACT_TABLE_NAME': 'Contact-test',
    'REGISTRY_SERVICE_EVENT_BUS_NAME': 'signal-registry-test',
    'REGISTRY_SERVICE_ENABLE_DEBUG_LOGGING': 'false'
})

from signal_registry.services.service_container import clear_services  # noqa: E402


ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(autouse=True)
def reset_service_container():
    """Each test starts with a fresh service container"""
    clear_services()
    yield
    clear_services()


@pytest.fixture
def aws_credentials():
    """Mocked AWS Credentials for moto"""
    os.environ.update({
        'AWS_ACCESS_KEY_ID': 'testing',
        'AWS_SECRET_ACCESS_KEY': 'testing',
        'AWS_SECURITY_TOKEN': 'testing',
        'AWS_SESSION_TOKEN': 'testing'
    })


@pytest.fixture
def mock_aws_services(aws_credentials):
    """Setup DynamoDB tables and the event bus with moto mocking"""
    with mock_aws():
        create_test_tables()
        create_test_event_bus()

        yield {
            'dynamodb': boto3.resource('dynamodb', region_name='us-east-1'),
            'events': boto3.client('events', region_name='us-east-1')
        }


def create_test_tables():
    """Create DynamoDB test tables"""
    dynamodb = boto3.resource('dynamodb', region_name='us-east-1')

    identity_table = dynamodb.create_table(
        TableName=os.environ['IDENTITY_TABLE_NAME'],
        KeySchema=[
            {'AttributeName': 'identity', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'identity', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )

    nickname_table = dynamodb.create_table(
        TableName=os.environ['IDENTITY_NICKNAME_TABLE_NAME'],
        KeySchema=[
            {'AttributeName': 'nickname', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'nickname', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )

    contact_table = dynamodb.create_table(
        TableName=os.environ['CONTACT_TABLE_NAME'],
        KeySchema=[
            {'AttributeName': 'owner', 'KeyType': 'HASH'},
            {'AttributeName': 'contact_key', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'owner', 'AttributeType': 'S'},
            {'AttributeName': 'contact_key', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )

    identity_table.wait_until_exists()
    nickname_table.wait_until_exists()
    contact_table.wait_until_exists()


def create_test_event_bus():
    """Create the EventBridge bus for Offer/Answer notifications"""
    events = boto3.client('events', region_name='us-east-1')
    events.create_event_bus(Name=os.environ['REGISTRY_SERVICE_EVENT_BUS_NAME'])


@pytest.fixture
def identity_registry(mock_aws_services):
    from signal_registry.services.identity_registry import IdentityRegistry
    return IdentityRegistry()


@pytest.fixture
def contact_book(mock_aws_services):
    from signal_registry.services.contact_book import ContactBook
    return ContactBook()


@pytest.fixture
def recording_transport():
    """Transport double recording every published message"""
    return MagicMock()


@pytest.fixture
def signal_channel(recording_transport):
    from signal_registry.services.signal_channel import SignalChannel
    return SignalChannel(transport=recording_transport)


@pytest.fixture
def lambda_context():
    """Mock Lambda context"""
    context = MagicMock()
    context.function_name = 'test-function'
    context.function_version = '$LATEST'
    context.invoked_function_arn = 'arn:aws:lambda:us-east-1:123456789012:function:test-function'
    context.memory_limit_in_mb = 128
    context.remaining_time_in_millis = lambda: 30000
    context.aws_request_id = 'test-request-id'
    return context


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway events authenticated as the given identity"""
    def build(body: dict, caller: str = 'identity-alice'):
        authorizer = {'claims': {'sub': caller, 'cognito:username': 'test_user'}} if caller else {}
        return {
            'httpMethod': 'POST',
            'path': '/test',
            'resource': '/test',
            'requestContext': {
                'accountId': '123456789012',
                'apiId': 'test-api',
                'stage': 'test',
                'requestId': 'test-request-id',
                'identity': {
                    'sourceIp': '127.0.0.1'
                },
                'authorizer': authorizer
            },
            'headers': {
                'Content-Type': 'application/json'
            },
            'queryStringParameters': None,
            'body': json.dumps(body),
            'isBase64Encoded': False
        }
    return build


@pytest.fixture
def direct_event():
    """Factory for direct Lambda invocation events from a trusted caller"""
    def build(body: dict, caller: str = 'identity-alice'):
        event = dict(body)
        if caller:
            event['caller'] = caller
        return event
    return build


@pytest.fixture
def load_app():
    """
    Load a function's app.py under a unique module name

    Every function directory ships an app.py, so they cannot share the
    plain 'app' module name within one test session.
    """
    def load(function_dir: str):
        path = os.path.join(ROOT_DIR, function_dir, 'app.py')
        module_name = f"{function_dir.replace('-', '_')}_app"
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module
    return load


def hex_of(value: bytes) -> str:
    return '0x' + value.hex()


@pytest.fixture
def fixed():
    """Helpers producing exactly-sized byte values"""
    class Fixed:
        @staticmethod
        def nickname(text: str) -> bytes:
            return text.encode('utf-8').ljust(21, b'\x00')

        @staticmethod
        def address(fill: int) -> bytes:
            return bytes([fill]) + b'\x00' * 31

        @staticmethod
        def blob(width: int, fill: int) -> bytes:
            return bytes([fill]) * width

        hex = staticmethod(hex_of)

    return Fixed()
