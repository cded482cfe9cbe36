"""
Transient Offer/Answer signaling messages
Built per call, emitted once, never persisted
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..codec import encode_hex
from ..constants import FieldWidths, SignalConstants


@dataclass(frozen=True)
class SignalMessage:
    """An Offer or Answer addressed from one identity to another"""
    kind: str
    payload: bytes
    sender: str
    recipient: str
    welcome_msg: Optional[bytes] = None

    def __post_init__(self):
        if self.kind not in SignalConstants.ALL_KINDS:
            raise ValueError(f"Unknown signal kind: {self.kind}")
        if len(self.payload) != FieldWidths.SIGNAL_PAYLOAD:
            raise ValueError(f"Signal payload must be {FieldWidths.SIGNAL_PAYLOAD} bytes")
        if self.kind == SignalConstants.OFFER:
            if self.welcome_msg is None or len(self.welcome_msg) != FieldWidths.WELCOME_MSG:
                raise ValueError(f"Offer welcome message must be {FieldWidths.WELCOME_MSG} bytes")
        elif self.welcome_msg is not None:
            raise ValueError("Only offers carry a welcome message")

    @classmethod
    def offer(cls, sender: str, welcome_msg: bytes, payload: bytes, recipient: str) -> 'SignalMessage':
        return cls(SignalConstants.OFFER, payload, sender, recipient, welcome_msg)

    @classmethod
    def answer(cls, sender: str, payload: bytes, recipient: str) -> 'SignalMessage':
        return cls(SignalConstants.ANSWER, payload, sender, recipient)

    def to_event(self) -> Dict[str, Any]:
        """
        Notification body, fields in emission order:
        Offer  -> offer, offered_by, offered_to, welcome_msg
        Answer -> answer, answer_from, answer_to
        """
        if self.kind == SignalConstants.OFFER:
            values = (encode_hex(self.payload), self.sender, self.recipient, encode_hex(self.welcome_msg))
            return dict(zip(SignalConstants.OFFER_FIELDS, values))

        values = (encode_hex(self.payload), self.sender, self.recipient)
        return dict(zip(SignalConstants.ANSWER_FIELDS, values))
