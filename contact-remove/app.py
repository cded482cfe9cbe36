"""
Contact Remove Lambda Function
Deletes a contact from the caller's contact book
"""
import os
import sys

# Add repository root to path for the shared package
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from signal_registry.codec import encode_hex
from signal_registry.constants import OperationConstants
from signal_registry.decorators import dispatch_handler
from signal_registry.services.service_container import get_service
from signal_registry.utils import create_success_response
from signal_registry.validation_utils import decode_fields


@dispatch_handler(required_fields=['addr'])
def lambda_handler(event, context):
    """
    Remove a contact

    Expected request format:
    {
        "addr": "0x..."     # Required: hex, at most 1000 bytes (zero-padded)
    }

    Removing a contact that does not exist succeeds.
    """
    caller = event['caller_identity']
    (addr,) = decode_fields(event['parsed_body'], ['addr'])

    contact_book = get_service('contact_book')
    contact_book.remove(caller, addr)

    return create_success_response(
        {'removed': encode_hex(addr), 'owner': caller, 'operation': OperationConstants.REMOVE_CONTACT},
        function_name='contact-remove'
    )
