"""
Registry Service Constants
Field widths, operation names and HTTP codes shared by all functions
"""


class HTTPConstants:
    """HTTP status codes and headers"""

    # Status codes
    OK = 200
    CREATED = 201
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503

    # MIME types
    JSON = 'application/json'


class FieldWidths:
    """Exact byte widths of every fixed-size field"""

    NICKNAME = 21
    ADDRESS = 32
    WELCOME_MSG = 300
    CONTACT_NAME = 1000
    CONTACT_ADDR = 1000
    SIGNAL_PAYLOAD = 2048


class SignalConstants:
    """Signal message kinds and their notification field order"""

    OFFER = 'Offer'
    ANSWER = 'Answer'

    ALL_KINDS = [OFFER, ANSWER]

    OFFER_FIELDS = ['offer', 'offered_by', 'offered_to', 'welcome_msg']
    ANSWER_FIELDS = ['answer', 'answer_from', 'answer_to']


class OperationConstants:
    """Dispatchable operation names"""

    OFFER_CHAT = 'offer_chat'
    REGISTER = 'register'
    ANSWER_CHAT = 'answer_chat'
    UPSERT_CONTACT = 'upsert_contact'
    REMOVE_CONTACT = 'remove_contact'
    GET_IDENTITY = 'get_identity'
    GET_CONTACT = 'get_contact'
    LIST_CONTACTS = 'list_contacts'


class ErrorCodes:
    """Error codes returned in failure responses"""

    VALIDATION_ERROR = 'VALIDATION_ERROR'
    AUTHENTICATION_ERROR = 'AUTHENTICATION_ERROR'
    IDENTITY_ALREADY_BOUND = 'IDENTITY_ALREADY_BOUND'
    NICKNAME_ALREADY_BOUND = 'NICKNAME_ALREADY_BOUND'
    NOTIFICATION_DELIVERY_ERROR = 'NOTIFICATION_DELIVERY_ERROR'
    DYNAMODB_ERROR = 'DYNAMODB_ERROR'
    CONFIGURATION_ERROR = 'CONFIGURATION_ERROR'
    INTERNAL_ERROR = 'INTERNAL_ERROR'


class LoggingConstants:
    """Event keys never written to logs verbatim"""

    REDACTED_FIELDS = [
        'offer', 'answer', 'welcome_msg', 'name', 'addr', 'address',
        'password', 'token', 'secret', 'authorization'
    ]
