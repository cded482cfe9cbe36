from .contact_book import ContactBook
from .identity_registry import IdentityRegistry
from .signal_channel import EventBridgeTransport, NotificationTransport, SignalChannel

__all__ = [
    'ContactBook',
    'IdentityRegistry',
    'EventBridgeTransport',
    'NotificationTransport',
    'SignalChannel',
]
