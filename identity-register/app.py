"""
Identity Register Lambda Function
Binds the calling identity to a unique nickname and address
"""
import os
import sys

# Add repository root to path for the shared package
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from signal_registry.constants import OperationConstants
from signal_registry.decorators import dispatch_handler
from signal_registry.exceptions import ValidationError
from signal_registry.services.service_container import get_service
from signal_registry.utils import address_record_to_dict, create_success_response
from signal_registry.validation_utils import decode_fields, has_nickname


@dispatch_handler(required_fields=['address'])
def lambda_handler(event, context):
    """
    Register a nickname for the caller

    Expected request format:
    {
        "nickname": "alice",      # Required unless nickname_hex: UTF-8 text, at most 21 bytes
        "nickname_hex": "0xff",   # Or the exact nickname bytes as hex, at most 21 bytes
        "address": "0x01..."      # Required: hex, at most 32 bytes (zero-padded)
    }

    A caller registers once; the nickname cannot be changed or released.
    """
    caller = event['caller_identity']
    if not has_nickname(event['parsed_body']):
        raise ValidationError('Missing required fields: nickname', field='nickname')

    nickname, address = decode_fields(event['parsed_body'], ['nickname', 'address'])

    identity_registry = get_service('identity_registry')
    record = identity_registry.register(caller, nickname, address)

    return create_success_response(
        {'record': address_record_to_dict(caller, record), 'operation': OperationConstants.REGISTER},
        function_name='identity-register'
    )
