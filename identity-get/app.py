"""
Identity Get Lambda Function
Looks up address records by identity or nickname
"""
import os
import sys

# Add repository root to path for the shared package
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from signal_registry.constants import OperationConstants
from signal_registry.decorators import dispatch_handler
from signal_registry.models.identity import AddressRecord
from signal_registry.services.service_container import get_service
from signal_registry.utils import address_record_to_dict, create_success_response
from signal_registry.validation_utils import decode_fields, has_nickname, validate_identity


@dispatch_handler()
def lambda_handler(event, context):
    """
    Look up a registration

    Expected request format (all optional, caller's own record by default):
    {
        "identity": "abc-123",    # Look up by identity
        "nickname": "alice",      # Or resolve a nickname to its owner
        "nickname_hex": "0xff"    # Or resolve the exact nickname bytes
    }

    Unknown identities and free nicknames return the all-zero record with
    "registered": false.
    """
    body = event['parsed_body']
    identity_registry = get_service('identity_registry')

    if has_nickname(body):
        (nickname,) = decode_fields(body, ['nickname'])
        identity = identity_registry.resolve_nickname(nickname)
        lookup = 'nickname'
    else:
        identity = validate_identity(body['identity'], 'identity') if body.get('identity') else event['caller_identity']
        lookup = 'identity'

    record = identity_registry.find_record(identity) if identity else None

    if record is None:
        data = address_record_to_dict(identity, AddressRecord.empty(), registered=False)
    else:
        data = address_record_to_dict(identity, record)

    return create_success_response(
        {'record': data, 'operation': OperationConstants.GET_IDENTITY},
        {'lookup': lookup},
        'identity-get'
    )
