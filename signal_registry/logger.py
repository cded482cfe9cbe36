"""
CloudWatch logging utilities for registry-service
"""
import json
import traceback
from datetime import datetime, timezone
from .config import config
from .constants import LoggingConstants


class RegistryLogger:
    """
    Structured logger for registry-service with CloudWatch optimization
    """

    def __init__(self, service_name: str = "registry-service"):
        self.service_name = service_name
        self.environment = config.environment
        self.debug_enabled = config.enable_debug_logging

    def _log(self, level: str, message: str, **kwargs):
        """Internal log method with structured format"""
        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level.upper(),
            'service': self.service_name,
            'environment': self.environment,
            'message': message
        }

        if kwargs:
            log_entry.update(kwargs)

        # Print to stdout (CloudWatch will capture this)
        print(json.dumps(log_entry, default=str))

    def debug(self, message: str, **kwargs):
        """Log debug message (only if debug enabled)"""
        if self.debug_enabled:
            self._log('debug', message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message"""
        self._log('info', message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message"""
        self._log('warning', message, **kwargs)

    def error(self, message: str, error: Exception = None, **kwargs):
        """Log error message with optional exception details"""
        log_data = kwargs.copy()

        if error:
            log_data['error_type'] = type(error).__name__
            log_data['error_message'] = str(error)
            log_data['traceback'] = traceback.format_exc()

        self._log('error', message, **log_data)

    def log_lambda_start(self, function_name: str, event: dict, context=None):
        """Log Lambda function start"""
        log_data = {
            'function_name': function_name,
            'request_id': getattr(context, 'aws_request_id', 'unknown') if context else 'unknown',
            'event_keys': list(event.keys()) if isinstance(event, dict) else 'non-dict',
        }

        # Payloads and contact data are opaque blobs; only log their shape
        if isinstance(event, dict):
            safe_event = {}
            for key, value in event.items():
                if key.lower() in LoggingConstants.REDACTED_FIELDS:
                    safe_event[key] = '[REDACTED]'
                elif isinstance(value, (str, int, float, bool)):
                    safe_event[key] = value
                else:
                    safe_event[key] = str(type(value).__name__)
            log_data['event'] = safe_event

        self._log('info', f"Lambda function {function_name} started", **log_data)

    def log_lambda_end(self, function_name: str, success: bool = True, duration_ms: float = None, **kwargs):
        """Log Lambda function completion"""
        log_data = {
            'function_name': function_name,
            'success': success,
        }

        if duration_ms is not None:
            log_data['duration_ms'] = round(duration_ms, 2)

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Lambda function {function_name} {'completed' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_service_operation(self, operation: str, identity: str = None, **kwargs):
        """Log service operation"""
        log_data = {
            'operation': operation
        }

        if identity:
            log_data['identity'] = identity

        log_data.update(kwargs)

        self._log('info', f"Service operation: {operation}", **log_data)

    def log_database_operation(self, table_name: str, operation: str, success: bool = True, **kwargs):
        """Log database operation"""
        log_data = {
            'table_name': table_name,
            'operation': operation,
            'success': success
        }

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"Database {operation} on {table_name} {'succeeded' if success else 'failed'}"

        self._log(level, message, **log_data)

    def log_notification(self, kind: str, event_bus: str, success: bool = True, **kwargs):
        """Log Offer/Answer notification delivery"""
        log_data = {
            'kind': kind,
            'event_bus': event_bus,
            'success': success
        }

        log_data.update(kwargs)

        level = 'info' if success else 'error'
        message = f"{kind} notification on {event_bus} {'delivered' if success else 'failed'}"

        self._log(level, message, **log_data)


# Global logger instances
logger = RegistryLogger("registry-service")
identity_logger = RegistryLogger("identity-registry")
contact_logger = RegistryLogger("contact-book")
signal_logger = RegistryLogger("signal-channel")
