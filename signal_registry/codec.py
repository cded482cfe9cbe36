"""
Fixed-width byte field codec

Every stored or signalled value has an exact width. Wire values are hex
strings (optional 0x prefix); shorter values are zero-padded on the right,
longer values are rejected.
"""
import binascii
import hashlib
from typing import Union

from .constants import FieldWidths
from .exceptions import ValidationError


def pad(value: bytes, width: int, field: str = None) -> bytes:
    """
    Right-pad value with zero bytes to exactly width bytes

    Raises:
        ValidationError: If value is longer than width
    """
    if len(value) > width:
        raise ValidationError(
            f"{field or 'value'} must be at most {width} bytes, got {len(value)}",
            field=field
        )
    return value + b'\x00' * (width - len(value))


def zeros(width: int) -> bytes:
    """Default (empty) value of a fixed-width field"""
    return b'\x00' * width


def decode_hex(value: Union[str, bytes], width: int, field: str = None) -> bytes:
    """
    Decode a hex wire value into a fixed-width byte string

    Args:
        value: Hex string, optionally 0x-prefixed, or raw bytes
        width: Exact width of the field
        field: Field name used in error messages

    Returns:
        Exactly width bytes
    """
    if isinstance(value, (bytes, bytearray)):
        return pad(bytes(value), width, field)

    if not isinstance(value, str):
        raise ValidationError(f"{field or 'value'} must be a hex string", field=field)

    text = value.strip()
    if text[:2].lower() == '0x':
        text = text[2:]

    if len(text) % 2:
        raise ValidationError(f"{field or 'value'} has an odd number of hex digits", field=field)

    try:
        raw = binascii.unhexlify(text)
    except (binascii.Error, ValueError):
        raise ValidationError(f"{field or 'value'} is not valid hex", field=field)

    return pad(raw, width, field)


def encode_hex(value: bytes) -> str:
    """Render bytes as lowercase 0x-prefixed hex"""
    return '0x' + binascii.hexlify(value).decode('ascii')


def storage_hex(value: bytes) -> str:
    """Hex form used for DynamoDB attributes and keys (no prefix)"""
    return binascii.hexlify(value).decode('ascii')


def from_storage_hex(value: str, width: int) -> bytes:
    """Inverse of storage_hex; tolerates records written with a shorter value"""
    return pad(binascii.unhexlify(value or ''), width)


def encode_nickname(value: Union[str, bytes], field: str = 'nickname') -> bytes:
    """
    Encode a nickname into its 21-byte form

    Text nicknames are UTF-8 encoded; raw bytes are taken as-is. Any 21 bytes
    are a valid nickname, including all zeros.
    """
    if isinstance(value, str):
        raw = value.encode('utf-8')
    elif isinstance(value, (bytes, bytearray)):
        raw = bytes(value)
    else:
        raise ValidationError("Nickname must be a string", field=field)

    return pad(raw, FieldWidths.NICKNAME, field)


def decode_nickname(value: bytes) -> str:
    """Best-effort display form of a stored nickname"""
    return value.rstrip(b'\x00').decode('utf-8', errors='replace')


def address_digest(address: bytes) -> str:
    """
    Content-addressed range key for a contact address

    Contact addresses are 1000 bytes, which exceeds DynamoDB's range key limit.
    """
    return hashlib.blake2b(address, digest_size=16).hexdigest()
