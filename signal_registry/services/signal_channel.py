"""
Signal Channel Service
Stateless relay packaging Offer/Answer payloads into notifications
"""
import json
from typing import Optional
import boto3
from botocore.exceptions import ClientError, BotoCoreError
from ..config import config
from ..exceptions import ConfigurationError, NotificationDeliveryError
from ..logger import signal_logger as logger
from ..models.signal import SignalMessage


class NotificationTransport:
    """Delivers signal messages to observers"""

    def publish(self, message: SignalMessage) -> None:
        raise NotImplementedError


class EventBridgeTransport(NotificationTransport):
    """
    Publishes each signal as one EventBridge event

    DetailType is the signal kind; Detail is the JSON event body.
    """

    def __init__(self, event_bus_name: Optional[str] = None, source: Optional[str] = None, client=None):
        self.event_bus_name = event_bus_name or config.event_bus_name
        self.source = source or config.event_source
        self._client = client

        if not self.event_bus_name:
            raise ConfigurationError("Event bus name is not configured", config_key='event-bus-name')

    @property
    def client(self):
        """Lazy initialization of EventBridge client"""
        if self._client is None:
            self._client = boto3.client('events', region_name=config.aws_region)
        return self._client

    def publish(self, message: SignalMessage) -> None:
        entry = {
            'Source': self.source,
            'DetailType': message.kind,
            'Detail': json.dumps(message.to_event()),
            'EventBusName': self.event_bus_name
        }

        try:
            response = self.client.put_events(Entries=[entry])
        except (ClientError, BotoCoreError) as e:
            logger.log_notification(message.kind, self.event_bus_name, success=False, error=str(e))
            raise NotificationDeliveryError(
                f"Failed to publish {message.kind} notification",
                kind=message.kind,
                event_bus=self.event_bus_name,
                original_error=str(e)
            )

        if response.get('FailedEntryCount', 0):
            failure = (response.get('Entries') or [{}])[0]
            logger.log_notification(
                message.kind,
                self.event_bus_name,
                success=False,
                error_code=failure.get('ErrorCode'),
                error=failure.get('ErrorMessage')
            )
            raise NotificationDeliveryError(
                f"{message.kind} notification was rejected",
                kind=message.kind,
                event_bus=self.event_bus_name,
                original_error=failure.get('ErrorMessage')
            )

        logger.log_notification(
            message.kind,
            self.event_bus_name,
            sender=message.sender,
            recipient=message.recipient
        )


class SignalChannel:
    """
    Service for relaying chat offers and answers

    Owns no storage and does not check that the recipient is registered.
    """

    def __init__(self, transport: Optional[NotificationTransport] = None):
        self._transport = transport

    @property
    def transport(self) -> NotificationTransport:
        if self._transport is None:
            self._transport = EventBridgeTransport()
        return self._transport

    def offer(self, caller: str, welcome_msg: bytes, offer: bytes, to: str) -> SignalMessage:
        """
        Emit an Offer from caller to recipient

        Args:
            caller: Authenticated caller identity
            welcome_msg: 300-byte welcome message
            offer: 2048-byte offer payload
            to: Recipient identity

        Returns:
            The emitted message
        """
        message = SignalMessage.offer(caller, welcome_msg, offer, to)
        self.transport.publish(message)

        logger.log_service_operation('offer_chat', identity=caller, recipient=to)
        return message

    def answer(self, caller: str, answer: bytes, to: str) -> SignalMessage:
        """
        Emit an Answer from caller to recipient

        Returns:
            The emitted message
        """
        message = SignalMessage.answer(caller, answer, to)
        self.transport.publish(message)

        logger.log_service_operation('answer_chat', identity=caller, recipient=to)
        return message
