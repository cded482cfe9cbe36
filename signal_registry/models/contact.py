"""
PynamoDB model for per-owner contact book entries
"""
from datetime import datetime, timezone
from typing import NamedTuple, Optional
from pynamodb.models import Model
from pynamodb.attributes import UnicodeAttribute, UTCDateTimeAttribute
from pynamodb.exceptions import DoesNotExist
from ..codec import address_digest, from_storage_hex, storage_hex, zeros
from ..config import config
from ..constants import FieldWidths
from ..error_handler import error_handler
from ..logger import contact_logger as logger


class ContactRecord(NamedTuple):
    """Value copy of a stored contact"""
    name: bytes

    @classmethod
    def empty(cls) -> 'ContactRecord':
        return cls(zeros(FieldWidths.CONTACT_NAME))


class Contact(Model):
    """
    Contact stored under (owner identity, contact address)

    The 1000-byte address does not fit a DynamoDB range key, so the range key
    is its BLAKE2b digest and the full address is kept on the item.
    """

    class Meta:
        table_name = config.contact_table_name
        region = config.aws_region
        host = config.dynamodb_host
        billing_mode = 'PAY_PER_REQUEST'

    owner = UnicodeAttribute(hash_key=True)
    contact_key = UnicodeAttribute(range_key=True)

    # 1000-byte values, hex encoded
    address = UnicodeAttribute()
    name = UnicodeAttribute()

    updated_at = UTCDateTimeAttribute(default=lambda: datetime.now(timezone.utc))

    def save(self, **kwargs):
        """Override save to update timestamp"""
        self.updated_at = datetime.now(timezone.utc)
        return super().save(**kwargs)

    @classmethod
    def build(cls, owner: str, address: bytes, name: bytes) -> 'Contact':
        return cls(
            owner,
            address_digest(address),
            address=storage_hex(address),
            name=storage_hex(name)
        )

    @classmethod
    def find(cls, owner: str, address: bytes) -> Optional['Contact']:
        """
        Get contact by owner and address

        Returns:
            Contact instance or None if not stored
        """
        try:
            contact = cls.get(owner, address_digest(address))
        except DoesNotExist:
            return None
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'get_contact', cls.Meta.table_name)

        # Digest collision guard
        if contact.address_bytes != address:
            logger.warning("Contact digest matched a different address", owner=owner)
            return None

        return contact

    @property
    def address_bytes(self) -> bytes:
        return from_storage_hex(self.address, FieldWidths.CONTACT_ADDR)

    def to_value(self) -> ContactRecord:
        """Detached copy of the stored record"""
        return ContactRecord(name=from_storage_hex(self.name, FieldWidths.CONTACT_NAME))
