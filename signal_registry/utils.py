"""
Response helpers for registry-service Lambda functions
"""
import json
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .codec import decode_nickname, encode_hex
from .models.contact import ContactRecord
from .models.identity import AddressRecord


def create_response(status_code: int, body: str, headers: Optional[dict] = None) -> Dict[str, Any]:
    """
    Create standardized Lambda proxy response

    Args:
        status_code: HTTP status code
        body: Response body (JSON string)
        headers: Additional headers

    Returns:
        Lambda proxy integration response
    """
    default_headers = {
        'Content-Type': 'application/json',
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Headers': 'Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token',
        'Access-Control-Allow-Methods': 'GET,POST,PUT,DELETE,OPTIONS'
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': body
    }


def create_success_response(data: Any, metadata: Optional[Dict[str, Any]] = None, function_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Create protocol-agnostic success response for internal Lambda communication

    Args:
        data: The actual response data
        metadata: Optional metadata dict
        function_name: Name of the function generating the response

    Returns:
        Protocol-agnostic success response
    """
    response = {
        "success": True,
        "data": data
    }

    response_metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if function_name:
        response_metadata["function_name"] = function_name

    if metadata:
        response_metadata.update(metadata)

    response["metadata"] = response_metadata

    return response


def create_failure_response(error_code: str, message: str, details: Optional[Dict[str, Any]] = None, function_name: Optional[str] = None) -> Dict[str, Any]:
    """
    Create protocol-agnostic failure response for internal Lambda communication

    Args:
        error_code: Error code (e.g., 'VALIDATION_ERROR', 'NICKNAME_ALREADY_BOUND')
        message: Human-readable error message
        details: Optional error details dict
        function_name: Name of the function generating the response

    Returns:
        Protocol-agnostic failure response
    """
    response = {
        "success": False,
        "error": {
            "code": error_code,
            "message": message
        }
    }

    if details:
        response["error"]["details"] = details

    response_metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

    if function_name:
        response_metadata["function_name"] = function_name

    response["metadata"] = response_metadata

    return response


def address_record_to_dict(identity: str, record: AddressRecord, registered: bool = True) -> Dict[str, Any]:
    """Convert an identity's address record to its response form"""
    return {
        'identity': identity,
        'registered': registered,
        'nickname': decode_nickname(record.nickname),
        'nickname_hex': encode_hex(record.nickname),
        'address': encode_hex(record.address)
    }


def contact_to_dict(owner: str, address: bytes, record: ContactRecord) -> Dict[str, Any]:
    """Convert a contact record to its response form"""
    return {
        'owner': owner,
        'addr': encode_hex(address),
        'name': encode_hex(record.name)
    }


def to_api_gateway_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Wrap a protocol-agnostic response for API Gateway proxy integration"""
    return create_response(status_code, json.dumps(payload))
