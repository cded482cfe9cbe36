"""
Registry Service Validation Utilities
Request field checks and fixed-width parameter decoding
"""
from typing import List, Dict, Any, Tuple

from .codec import decode_hex, encode_nickname
from .constants import FieldWidths
from .exceptions import ValidationError


# Wire field name -> exact width, for every hex-encoded request field
HEX_FIELD_WIDTHS = {
    'address': FieldWidths.ADDRESS,
    'welcome_msg': FieldWidths.WELCOME_MSG,
    'offer': FieldWidths.SIGNAL_PAYLOAD,
    'answer': FieldWidths.SIGNAL_PAYLOAD,
    'name': FieldWidths.CONTACT_NAME,
    'addr': FieldWidths.CONTACT_ADDR,
}

MAX_IDENTITY_LENGTH = 256


def validate_required_fields(data: Dict[str, Any], required_fields: List[str]) -> List[str]:
    """
    Validate that all required fields are present in the data.

    Args:
        data: Dictionary containing the data to validate
        required_fields: List of required field names

    Returns:
        List of missing field names (empty if all fields are present)
    """
    if not isinstance(data, dict):
        return required_fields

    missing_fields = []
    for field in required_fields:
        if field not in data or data[field] is None or data[field] == "":
            missing_fields.append(field)

    return missing_fields


def has_nickname(body: Dict[str, Any]) -> bool:
    """Whether the body carries a nickname in text or hex form"""
    return bool(body.get('nickname_hex') or body.get('nickname'))


def decode_nickname_field(body: Dict[str, Any]) -> bytes:
    """
    Decode the request nickname into its 21-byte form

    'nickname_hex' carries the exact bytes and wins over the 'nickname' text
    form, so nicknames that are not valid UTF-8 can still be addressed.
    """
    if body.get('nickname_hex'):
        return decode_hex(body['nickname_hex'], FieldWidths.NICKNAME, 'nickname_hex')
    return encode_nickname(body.get('nickname'))


def validate_identity(value: Any, field: str = 'to') -> str:
    """
    Validate an identity handle supplied as a parameter (e.g. a recipient)

    Identities are opaque and used verbatim; only shape is checked, never
    existence.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} must be a non-empty identity", field=field)

    if value != value.strip():
        raise ValidationError(f"{field} must not have surrounding whitespace", field=field)

    if len(value) > MAX_IDENTITY_LENGTH:
        raise ValidationError(
            f"{field} must be at most {MAX_IDENTITY_LENGTH} characters",
            field=field
        )
    return value


def decode_fields(body: Dict[str, Any], fields: List[str]) -> Tuple[bytes, ...]:
    """
    Decode the named request fields into fixed-width byte strings

    Args:
        body: Parsed request body
        fields: Field names, in the order the values should be returned

    Returns:
        Tuple of decoded values in the same order as fields
    """
    decoded = []
    for field in fields:
        if field == 'nickname':
            decoded.append(decode_nickname_field(body))
        else:
            decoded.append(decode_hex(body.get(field), HEX_FIELD_WIDTHS[field], field))
    return tuple(decoded)
