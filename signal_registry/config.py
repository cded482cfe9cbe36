"""
Configuration management for registry-service
Supports environment variables, SSM Parameter Store, and local .env files
"""
import os
from typing import Optional, Any
from functools import lru_cache
import boto3
from botocore.exceptions import ClientError, NoCredentialsError
from dotenv import load_dotenv

# Local development overrides (no-op when no .env file is present)
load_dotenv()


class Config:
    """
    Configuration manager with hybrid approach:
    1. Environment Variables (highest priority)
    2. AWS Parameter Store (environment-specific)
    3. Local defaults (development fallback)
    """

    def __init__(self):
        self.environment = os.environ.get('ENVIRONMENT', 'dev')
        self.parameter_store_prefix = os.environ.get(
            'PARAMETER_STORE_PREFIX',
            f'/signal-registry/{self.environment}/registry-service'
        )
        self.parameter_store_enabled = os.environ.get(
            'PARAMETER_STORE_ENABLED', 'true'
        ).lower() in ('true', '1', 'yes', 'on')
        self._ssm_client = None

    @property
    def ssm_client(self):
        """Lazy initialization of SSM client"""
        if self._ssm_client is None and self.parameter_store_enabled:
            try:
                self._ssm_client = boto3.client('ssm', region_name=self.aws_region)
            except (NoCredentialsError, Exception):
                # For local development or testing without AWS credentials
                self._ssm_client = None
        return self._ssm_client

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """
        Get configuration parameter with fallback hierarchy:
        1. Environment variable
        2. SSM Parameter Store
        3. Default value
        """
        # Try environment variable first (with registry service prefix)
        env_key = f"REGISTRY_SERVICE_{key.upper().replace('-', '_')}"
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return env_value

        # Try standard environment variable
        env_value = os.environ.get(key.upper().replace('-', '_'))
        if env_value is not None:
            return env_value

        # Try SSM Parameter Store
        ssm_value = self.get_ssm_parameter(key)
        if ssm_value is not None:
            return ssm_value

        return default

    @lru_cache(maxsize=128)
    def get_ssm_parameter(self, key: str) -> Optional[str]:
        """
        Get parameter from AWS SSM Parameter Store with caching
        """
        if not self.ssm_client:
            return None

        parameter_name = f"{self.parameter_store_prefix}/{key}"

        try:
            response = self.ssm_client.get_parameter(Name=parameter_name)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response['Error']['Code'] != 'ParameterNotFound':
                print(f"Error getting SSM parameter {parameter_name}: {e}")
            return None
        except Exception as e:
            print(f"Unexpected error getting SSM parameter {parameter_name}: {e}")
            return None

    def get_int_parameter(self, key: str, default: int = 0) -> int:
        """Get integer parameter"""
        value = self.get_parameter(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_bool_parameter(self, key: str, default: bool = False) -> bool:
        """Get boolean parameter"""
        value = self.get_parameter(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default

    def get_list_parameter(self, key: str, default: list = None, separator: str = ',') -> list:
        """Get list parameter (comma-separated string)"""
        value = self.get_parameter(key)
        if value is None:
            return default or []

        if isinstance(value, list):
            return value

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default or []

    # Common configuration getters
    @property
    def aws_region(self) -> str:
        """AWS region for DynamoDB, EventBridge and SSM"""
        return os.environ.get('AWS_REGION') or os.environ.get('AWS_DEFAULT_REGION') or 'us-east-1'

    @property
    def dynamodb_host(self) -> Optional[str]:
        """Optional DynamoDB endpoint override (DynamoDB Local)"""
        return self.get_parameter('dynamodb-host')

    @property
    def identity_table_name(self) -> str:
        """Get identity -> address record table name"""
        return self.get_parameter('identity-table-name', f'IdentityRecord-{self.environment}')

    @property
    def identity_nickname_table_name(self) -> str:
        """Get nickname -> identity binding table name"""
        return self.get_parameter('identity-nickname-table-name', f'NicknameBinding-{self.environment}')

    @property
    def contact_table_name(self) -> str:
        """Get contact book table name"""
        return self.get_parameter('contact-table-name', f'Contact-{self.environment}')

    @property
    def event_bus_name(self) -> str:
        """Get EventBridge bus that carries Offer/Answer notifications"""
        return self.get_parameter('event-bus-name', f'signal-registry-{self.environment}')

    @property
    def event_source(self) -> str:
        """Get EventBridge source for emitted notifications"""
        return self.get_parameter('event-source', 'signal-registry.signal-channel')

    @property
    def enable_debug_logging(self) -> bool:
        """Get debug logging flag"""
        return self.get_bool_parameter('enable-debug-logging', False)


# Global configuration instance
config = Config()
