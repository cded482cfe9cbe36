from .identity import AddressRecord, IdentityRecord, NicknameBinding
from .contact import Contact, ContactRecord
from .signal import SignalMessage

__all__ = [
    'AddressRecord',
    'IdentityRecord',
    'NicknameBinding',
    'Contact',
    'ContactRecord',
    'SignalMessage',
]
