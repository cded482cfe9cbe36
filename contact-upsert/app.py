"""
Contact Upsert Lambda Function
Inserts or overwrites a contact in the caller's contact book
"""
import os
import sys

# Add repository root to path for the shared package
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from signal_registry.constants import OperationConstants
from signal_registry.decorators import dispatch_handler
from signal_registry.services.service_container import get_service
from signal_registry.utils import contact_to_dict, create_success_response
from signal_registry.validation_utils import decode_fields


@dispatch_handler(required_fields=['name', 'addr'])
def lambda_handler(event, context):
    """
    Upsert a contact

    Expected request format:
    {
        "name": "0x...",    # Required: hex, at most 1000 bytes (opaque, zero-padded)
        "addr": "0x..."     # Required: hex, at most 1000 bytes (zero-padded)
    }
    """
    caller = event['caller_identity']
    name, addr = decode_fields(event['parsed_body'], ['name', 'addr'])

    contact_book = get_service('contact_book')
    record = contact_book.upsert(caller, addr, name)

    return create_success_response(
        {'contact': contact_to_dict(caller, addr, record), 'operation': OperationConstants.UPSERT_CONTACT},
        function_name='contact-upsert'
    )
