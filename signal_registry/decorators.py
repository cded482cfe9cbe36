"""
Lambda dispatch decorator for registry-service

Authenticates the caller, parses the request and turns service exceptions
into failure responses before anything reaches the client.
"""
import json
import time
from functools import wraps
from typing import List, Callable, Optional, Tuple
from .constants import ErrorCodes, HTTPConstants
from .error_handler import error_handler
from .exceptions import AuthenticationError, DynamoDBError, RegistryServiceError, ValidationError
from .logger import logger
from .utils import create_failure_response, to_api_gateway_response
from .validation_utils import validate_required_fields


STATUS_BY_ERROR_CODE = {
    ErrorCodes.VALIDATION_ERROR: HTTPConstants.BAD_REQUEST,
    ErrorCodes.AUTHENTICATION_ERROR: HTTPConstants.UNAUTHORIZED,
    ErrorCodes.IDENTITY_ALREADY_BOUND: HTTPConstants.CONFLICT,
    ErrorCodes.NICKNAME_ALREADY_BOUND: HTTPConstants.CONFLICT,
    ErrorCodes.NOTIFICATION_DELIVERY_ERROR: HTTPConstants.BAD_GATEWAY,
    ErrorCodes.DYNAMODB_ERROR: HTTPConstants.INTERNAL_SERVER_ERROR,
    ErrorCodes.CONFIGURATION_ERROR: HTTPConstants.INTERNAL_SERVER_ERROR,
    ErrorCodes.INTERNAL_ERROR: HTTPConstants.INTERNAL_SERVER_ERROR,
}


def is_api_gateway_event(event) -> bool:
    return isinstance(event, dict) and 'requestContext' in event


def status_for(response: dict) -> int:
    """HTTP status for a protocol-agnostic response"""
    if response.get('success'):
        return HTTPConstants.OK
    code = response.get('error', {}).get('code')
    return STATUS_BY_ERROR_CODE.get(code, HTTPConstants.INTERNAL_SERVER_ERROR)


def extract_request(event: dict) -> Tuple[dict, Optional[str]]:
    """
    Split an event into (body, caller identity)

    API Gateway events carry the caller in the Cognito authorizer claims
    (REST or HTTP API shape). Direct invocations come from trusted internal
    callers and carry the identity in the 'caller' field.
    """
    if is_api_gateway_event(event):
        raw_body = event.get('body') or '{}'
        try:
            body = json.loads(raw_body) if isinstance(raw_body, str) else raw_body
        except json.JSONDecodeError:
            raise ValidationError("Invalid JSON in request body", field='body')

        authorizer = event.get('requestContext', {}).get('authorizer') or {}
        claims = authorizer.get('claims') or authorizer.get('jwt', {}).get('claims') or {}
        caller = claims.get('sub')
    elif isinstance(event, dict):
        # Copy so the event never contains itself once parsed_body is set
        body = dict(event)
        caller = event.get('caller')
    else:
        body, caller = event, None

    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object", field='body')

    if not isinstance(caller, str) or not caller.strip():
        raise AuthenticationError()

    # Identities are opaque; never rewrite one
    if caller != caller.strip():
        raise AuthenticationError("Caller identity must not have surrounding whitespace")

    return body, caller


def dispatch_handler(required_fields: List[str] = None, log_requests: bool = True):
    """
    Decorator for registry operation handlers

    The wrapped handler receives the event with 'parsed_body' and
    'caller_identity' set and returns a protocol-agnostic response. API
    Gateway events get a proxy integration response; direct invocations get
    the protocol-agnostic response as-is.

    Args:
        required_fields: Fields that must be present and non-empty in the body
        log_requests: Whether to log request start/end
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(event, context):
            start_time = time.time()
            function_name = getattr(func, '__name__', 'unknown')

            if log_requests:
                logger.log_lambda_start(function_name, event, context)

            try:
                body, caller = extract_request(event)

                if required_fields:
                    missing_fields = validate_required_fields(body, required_fields)
                    if missing_fields:
                        raise ValidationError(
                            f'Missing required fields: {", ".join(missing_fields)}',
                            hints=[f'Required fields: {", ".join(required_fields)}']
                        )

                event['parsed_body'] = body
                event['caller_identity'] = caller

                result = func(event, context)

            except RegistryServiceError as e:
                if isinstance(e, ValidationError):
                    error_handler.handle_validation_error(e, e.field)
                result = create_failure_response(e.error_code, e.message, e.details or None, function_name)
                if isinstance(e, DynamoDBError) and e.retryable:
                    result['error']['retryable'] = True

            except ValueError as e:
                error_handler.handle_validation_error(e)
                result = create_failure_response(ErrorCodes.VALIDATION_ERROR, str(e), None, function_name)

            except Exception as e:
                logger.error(f"Unexpected error in {function_name}", error=e)
                result = create_failure_response(
                    ErrorCodes.INTERNAL_ERROR,
                    'Internal server error occurred',
                    None,
                    function_name
                )

            if log_requests:
                duration_ms = (time.time() - start_time) * 1000
                if result.get('success'):
                    logger.log_lambda_end(function_name, True, duration_ms)
                else:
                    logger.log_lambda_end(function_name, False, duration_ms, error_code=result['error']['code'])

            if is_api_gateway_event(event):
                return to_api_gateway_response(status_for(result), result)
            return result

        return wrapper
    return decorator
