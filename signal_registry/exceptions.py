"""
Registry Service Exceptions
Custom exception classes for registry-service operations
"""
from .constants import ErrorCodes


class RegistryServiceError(Exception):
    """Base exception for all registry service errors"""

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses"""
        result = {
            'error': self.__class__.__name__,
            'message': self.message
        }
        if self.error_code:
            result['error_code'] = self.error_code
        if self.details:
            result['details'] = self.details
        return result


class ValidationError(RegistryServiceError):
    """Raised when input validation fails"""

    def __init__(self, message: str, field: str = None, value: str = None, hints: list = None):
        self.field = field
        self.value = value
        self.hints = hints or []

        details = {}
        if field:
            details['field'] = field
        if value:
            details['value'] = value
        if hints:
            details['hints'] = hints

        super().__init__(message, ErrorCodes.VALIDATION_ERROR, details)


class AuthenticationError(RegistryServiceError):
    """Raised when the caller identity cannot be established"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorCodes.AUTHENTICATION_ERROR)


class IdentityAlreadyBoundError(RegistryServiceError):
    """Raised when the calling identity already owns a nickname binding"""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(
            f"Identity '{identity}' is already registered",
            ErrorCodes.IDENTITY_ALREADY_BOUND,
            {'identity': identity}
        )


class NicknameAlreadyBoundError(RegistryServiceError):
    """Raised when the requested nickname is owned by another identity"""

    def __init__(self, nickname: str):
        self.nickname = nickname
        super().__init__(
            f"Nickname '{nickname}' is already registered",
            ErrorCodes.NICKNAME_ALREADY_BOUND,
            {'nickname': nickname}
        )


class DynamoDBError(RegistryServiceError):
    """Raised when DynamoDB operations fail"""

    def __init__(self, message: str, operation: str = None, table: str = None,
                 original_error: str = None, retryable: bool = False):
        self.operation = operation
        self.table = table
        self.original_error = original_error
        self.retryable = retryable

        details = {}
        if operation:
            details['operation'] = operation
        if table:
            details['table'] = table
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, ErrorCodes.DYNAMODB_ERROR, details)


class NotificationDeliveryError(RegistryServiceError):
    """Raised when the notification transport rejects an Offer/Answer event"""

    def __init__(self, message: str, kind: str = None, event_bus: str = None, original_error: str = None):
        self.kind = kind
        self.event_bus = event_bus
        self.original_error = original_error

        details = {}
        if kind:
            details['kind'] = kind
        if event_bus:
            details['event_bus'] = event_bus
        if original_error:
            details['original_error'] = original_error

        super().__init__(message, ErrorCodes.NOTIFICATION_DELIVERY_ERROR, details)


class ConfigurationError(RegistryServiceError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, message: str, config_key: str = None, config_source: str = None):
        self.config_key = config_key
        self.config_source = config_source

        details = {}
        if config_key:
            details['config_key'] = config_key
        if config_source:
            details['config_source'] = config_source

        super().__init__(message, ErrorCodes.CONFIGURATION_ERROR, details)
