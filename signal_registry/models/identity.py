"""
PynamoDB models for identity <-> nickname bindings
Two tables kept in lockstep: one keyed by nickname, one keyed by identity
"""
from datetime import datetime, timezone
from typing import NamedTuple, Optional
from pynamodb.models import Model
from pynamodb.attributes import UnicodeAttribute, UTCDateTimeAttribute
from pynamodb.exceptions import DoesNotExist
from ..codec import from_storage_hex, storage_hex, zeros
from ..config import config
from ..constants import FieldWidths
from ..error_handler import error_handler
from ..logger import identity_logger as logger


class AddressRecord(NamedTuple):
    """Value copy of the record stored against a registered identity"""
    address: bytes
    nickname: bytes

    @classmethod
    def empty(cls) -> 'AddressRecord':
        """All-zero record returned for identities that never registered"""
        return cls(zeros(FieldWidths.ADDRESS), zeros(FieldWidths.NICKNAME))


class NicknameBinding(Model):
    """
    Nickname -> identity
    At most one identity owns a nickname
    """

    class Meta:
        table_name = config.identity_nickname_table_name
        region = config.aws_region
        host = config.dynamodb_host
        billing_mode = 'PAY_PER_REQUEST'

    # 21-byte nickname, hex encoded
    nickname = UnicodeAttribute(hash_key=True)
    identity = UnicodeAttribute()
    created_at = UTCDateTimeAttribute(default=lambda: datetime.now(timezone.utc))

    @classmethod
    def find(cls, nickname: bytes) -> Optional['NicknameBinding']:
        """
        Get binding by nickname

        Returns:
            NicknameBinding instance or None if the nickname is free
        """
        try:
            binding = cls.get(storage_hex(nickname))
        except DoesNotExist:
            logger.debug("Nickname not bound", nickname=storage_hex(nickname))
            return None
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'get_nickname_binding', cls.Meta.table_name)

        logger.log_database_operation(
            table_name=cls.Meta.table_name,
            operation='get',
            success=True,
            identity=binding.identity
        )
        return binding


class IdentityRecord(Model):
    """
    Identity -> (address, nickname)
    At most one nickname is owned by an identity
    """

    class Meta:
        table_name = config.identity_table_name
        region = config.aws_region
        host = config.dynamodb_host
        billing_mode = 'PAY_PER_REQUEST'

    identity = UnicodeAttribute(hash_key=True)

    # 32-byte address and 21-byte nickname, hex encoded
    address = UnicodeAttribute()
    nickname = UnicodeAttribute()

    created_at = UTCDateTimeAttribute(default=lambda: datetime.now(timezone.utc))

    @classmethod
    def find(cls, identity: str) -> Optional['IdentityRecord']:
        """
        Get record by identity

        Returns:
            IdentityRecord instance or None if the identity never registered
        """
        try:
            record = cls.get(identity)
        except DoesNotExist:
            logger.debug("Identity not registered", identity=identity)
            return None
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'get_identity_record', cls.Meta.table_name)

        logger.log_database_operation(
            table_name=cls.Meta.table_name,
            operation='get',
            success=True,
            identity=identity
        )
        return record

    def to_value(self) -> AddressRecord:
        """Detached copy of the stored record"""
        return AddressRecord(
            address=from_storage_hex(self.address, FieldWidths.ADDRESS),
            nickname=from_storage_hex(self.nickname, FieldWidths.NICKNAME)
        )
