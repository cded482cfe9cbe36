"""
Chat Offer Lambda Function
Relays a chat offer from the caller to another identity
"""
import os
import sys

# Add repository root to path for the shared package
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from signal_registry.constants import OperationConstants
from signal_registry.decorators import dispatch_handler
from signal_registry.services.service_container import get_service
from signal_registry.utils import create_success_response
from signal_registry.validation_utils import decode_fields, validate_identity


@dispatch_handler(required_fields=['welcome_msg', 'offer', 'to'])
def lambda_handler(event, context):
    """
    Open a chat with another identity

    Expected request format:
    {
        "welcome_msg": "0x...",   # Required: hex, at most 300 bytes (zero-padded)
        "offer": "0x...",         # Required: hex, at most 2048 bytes (zero-padded)
        "to": "recipient-id"      # Required: recipient identity (not checked for registration)
    }
    """
    caller = event['caller_identity']
    body = event['parsed_body']
    welcome_msg, offer = decode_fields(body, ['welcome_msg', 'offer'])
    to = validate_identity(body['to'])

    signal_channel = get_service('signal_channel')
    message = signal_channel.offer(caller, welcome_msg, offer, to)

    return create_success_response(
        {'event': message.kind, 'detail': message.to_event(), 'operation': OperationConstants.OFFER_CHAT},
        function_name='chat-offer'
    )
