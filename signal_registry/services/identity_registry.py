"""
Identity Registry Service
Write-once 1:1 binding between caller identities and nicknames
"""
from typing import Optional, Type
from pynamodb.connection import Connection
from pynamodb.exceptions import TransactWriteError
from pynamodb.transactions import TransactWrite
from ..codec import decode_nickname, storage_hex
from ..config import config
from ..error_handler import error_handler
from ..exceptions import IdentityAlreadyBoundError, NicknameAlreadyBoundError
from ..logger import identity_logger as logger
from ..models.identity import AddressRecord, IdentityRecord, NicknameBinding


class IdentityRegistry:
    """
    Service owning the nickname -> identity and identity -> record tables

    Both uniqueness invariants hold across concurrent callers: the two items
    are written in one conditional transaction, so a register that races past
    the pre-checks is cancelled rather than partially applied.
    """

    def __init__(
        self,
        record_model: Type[IdentityRecord] = IdentityRecord,
        binding_model: Type[NicknameBinding] = NicknameBinding,
        connection: Optional[Connection] = None
    ):
        self.record_model = record_model
        self.binding_model = binding_model
        self._connection = connection

    @property
    def connection(self) -> Connection:
        """Lazy DynamoDB connection for transactions"""
        if self._connection is None:
            self._connection = Connection(region=config.aws_region, host=config.dynamodb_host)
        return self._connection

    def register(self, caller: str, nickname: bytes, address: bytes) -> AddressRecord:
        """
        Bind nickname and address to caller

        Args:
            caller: Authenticated caller identity
            nickname: 21-byte nickname
            address: 32-byte address

        Returns:
            The stored record

        Raises:
            IdentityAlreadyBoundError: If caller already owns a nickname (checked first)
            NicknameAlreadyBoundError: If nickname is owned by any identity
        """
        self._ensure_available(caller, nickname)

        record = self.record_model(
            caller,
            address=storage_hex(address),
            nickname=storage_hex(nickname)
        )
        binding = self.binding_model(storage_hex(nickname), identity=caller)

        try:
            with TransactWrite(connection=self.connection) as transaction:
                transaction.save(record, condition=self.record_model.identity.does_not_exist())
                transaction.save(binding, condition=self.binding_model.nickname.does_not_exist())
        except TransactWriteError as e:
            # Lost a race with another register; report which invariant won
            self._ensure_available(caller, nickname)
            raise error_handler.to_dynamodb_error(e, 'register', self.record_model.Meta.table_name)

        logger.log_service_operation(
            'register',
            identity=caller,
            nickname=decode_nickname(nickname)
        )

        return record.to_value()

    def _ensure_available(self, caller: str, nickname: bytes):
        if self.is_registered(caller):
            logger.info("Registration rejected: identity already bound", identity=caller)
            raise IdentityAlreadyBoundError(caller)

        if self.nickname_taken(nickname):
            logger.info(
                "Registration rejected: nickname already bound",
                identity=caller,
                nickname=decode_nickname(nickname)
            )
            raise NicknameAlreadyBoundError(decode_nickname(nickname))

    def is_registered(self, identity: str) -> bool:
        """Existence check for an identity's record"""
        return self.record_model.find(identity) is not None

    def find_record(self, identity: str) -> Optional[AddressRecord]:
        """Record for identity, or None if it never registered"""
        record = self.record_model.find(identity)
        return record.to_value() if record else None

    def get_record(self, identity: str) -> AddressRecord:
        """Record for identity, or the all-zero default if it never registered"""
        return self.find_record(identity) or AddressRecord.empty()

    def resolve_nickname(self, nickname: bytes) -> Optional[str]:
        """Identity owning nickname, or None if the nickname is free"""
        binding = self.binding_model.find(nickname)
        return binding.identity if binding else None

    def nickname_taken(self, nickname: bytes) -> bool:
        return self.resolve_nickname(nickname) is not None
