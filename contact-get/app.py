"""
Contact Get Lambda Function
Reads one contact, or lists all contacts, of the caller
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


@dispatch_handler()
def lambda_handler(event, context):
    """
    Read contacts

    Expected request format:
    {
        "addr": "0x..."     # Optional: single contact; omit to list all
    }

    A single lookup of an unknown address returns the all-zero name with
    "exists": false. Only the caller's own contacts are ever returned.
    """
    caller = event['caller_identity']
    body = event['parsed_body']
    contact_book = get_service('contact_book')

    if body.get('addr'):
        (addr,) = decode_fields(body, ['addr'])
        contact = contact_to_dict(caller, addr, contact_book.get(caller, addr))
        contact['exists'] = contact_book.contains(caller, addr)

        return create_success_response(
            {'contact': contact, 'operation': OperationConstants.GET_CONTACT},
            function_name='contact-get'
        )

    contacts = [
        contact_to_dict(caller, addr, record)
        for addr, record in contact_book.list_contacts(caller)
    ]

    return create_success_response(
        {'contacts': contacts, 'count': len(contacts), 'operation': OperationConstants.LIST_CONTACTS},
        function_name='contact-get'
    )
