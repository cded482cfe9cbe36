"""
Chat Answer Lambda Function
Relays an answer to a chat offer back to the offering identity
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


@dispatch_handler(required_fields=['answer', 'to'])
def lambda_handler(event, context):
    """
    Answer a chat offer

    Expected request format:
    {
        "answer": "0x...",        # Required: hex, at most 2048 bytes (zero-padded)
        "to": "offerer-id"        # Required: recipient identity
    }
    """
    caller = event['caller_identity']
    body = event['parsed_body']
    (answer,) = decode_fields(body, ['answer'])
    to = validate_identity(body['to'])

    signal_channel = get_service('signal_channel')
    message = signal_channel.answer(caller, answer, to)

    return create_success_response(
        {'event': message.kind, 'detail': message.to_event(), 'operation': OperationConstants.ANSWER_CHAT},
        function_name='chat-answer'
    )
