"""
Contact Book Service
Private per-owner contact records keyed by peer address
"""
from typing import List, Tuple, Type
from ..codec import address_digest
from ..error_handler import error_handler
from ..logger import contact_logger as logger
from ..models.contact import Contact, ContactRecord


class ContactBook:
    """
    Service for managing an owner's contacts

    Upsert and remove never fail for an authenticated owner; there are no
    invariants across entries.
    """

    def __init__(self, contact_model: Type[Contact] = Contact):
        self.contact_model = contact_model

    @property
    def table_name(self) -> str:
        return self.contact_model.Meta.table_name

    def upsert(self, owner: str, peer_address: bytes, name: bytes) -> ContactRecord:
        """
        Insert or overwrite the contact at (owner, peer_address)

        Args:
            owner: Authenticated caller identity
            peer_address: 1000-byte contact address
            name: 1000-byte opaque contact name

        Returns:
            The stored record
        """
        contact = self.contact_model.build(owner, peer_address, name)

        try:
            contact.save()
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'upsert_contact', self.table_name)

        logger.log_database_operation(
            table_name=self.table_name,
            operation='upsert',
            success=True,
            owner=owner,
            contact_key=contact.contact_key
        )

        return contact.to_value()

    def remove(self, owner: str, peer_address: bytes) -> None:
        """
        Delete the contact at (owner, peer_address); absent keys are a no-op
        """
        contact = self.contact_model(owner, address_digest(peer_address))

        try:
            contact.delete()
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'remove_contact', self.table_name)

        logger.log_database_operation(
            table_name=self.table_name,
            operation='remove',
            success=True,
            owner=owner,
            contact_key=contact.contact_key
        )

    def get(self, owner: str, peer_address: bytes) -> ContactRecord:
        """Stored record, or the all-zero default when absent"""
        contact = self.contact_model.find(owner, peer_address)
        return contact.to_value() if contact else ContactRecord.empty()

    def contains(self, owner: str, peer_address: bytes) -> bool:
        return self.contact_model.find(owner, peer_address) is not None

    def list_contacts(self, owner: str) -> List[Tuple[bytes, ContactRecord]]:
        """All of owner's contacts as (address, record) pairs"""
        try:
            contacts = [
                (contact.address_bytes, contact.to_value())
                for contact in self.contact_model.query(owner)
            ]
        except Exception as e:
            raise error_handler.to_dynamodb_error(e, 'list_contacts', self.table_name)

        logger.log_database_operation(
            table_name=self.table_name,
            operation='query',
            success=True,
            owner=owner,
            result_count=len(contacts)
        )

        return contacts
