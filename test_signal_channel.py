"""
Tests for the signal channel service and EventBridge transport
"""
import json
import pytest
from unittest.mock import MagicMock
from botocore.exceptions import ClientError

from signal_registry.exceptions import NotificationDeliveryError
from signal_registry.models.identity import IdentityRecord
from signal_registry.models.signal import SignalMessage
from signal_registry.services.signal_channel import EventBridgeTransport, SignalChannel


class TestSignalChannel:

    def test_offer_emits_one_event_in_field_order(self, signal_channel, recording_transport, fixed):
        welcome = fixed.blob(300, 0x57)
        offer = fixed.blob(2048, 0x0F)

        message = signal_channel.offer('identity-a', welcome, offer, 'identity-b')

        recording_transport.publish.assert_called_once_with(message)
        event = message.to_event()
        assert list(event) == ['offer', 'offered_by', 'offered_to', 'welcome_msg']
        assert event['offer'] == fixed.hex(offer)
        assert event['offered_by'] == 'identity-a'
        assert event['offered_to'] == 'identity-b'
        assert event['welcome_msg'] == fixed.hex(welcome)

    def test_answer_emits_one_event_in_field_order(self, signal_channel, recording_transport, fixed):
        answer = fixed.blob(2048, 0x0A)

        message = signal_channel.answer('identity-b', answer, 'identity-a')

        recording_transport.publish.assert_called_once_with(message)
        assert message.to_event() == {
            'answer': fixed.hex(answer),
            'answer_from': 'identity-b',
            'answer_to': 'identity-a',
        }
        assert message.welcome_msg is None

    def test_unknown_recipient_is_not_checked(self, signal_channel, recording_transport, fixed):
        signal_channel.offer('identity-a', fixed.blob(300, 0), fixed.blob(2048, 0), 'never-registered')

        assert recording_transport.publish.call_count == 1

    def test_signals_touch_no_store(self, mock_aws_services, signal_channel, fixed):
        signal_channel.offer('identity-a', fixed.blob(300, 1), fixed.blob(2048, 2), 'identity-b')
        signal_channel.answer('identity-b', fixed.blob(2048, 3), 'identity-a')

        assert list(IdentityRecord.scan()) == []

    def test_wrong_width_payload_is_rejected_before_emission(self, signal_channel, recording_transport):
        with pytest.raises(ValueError):
            signal_channel.answer('identity-a', b'\x01' * 10, 'identity-b')

        recording_transport.publish.assert_not_called()


class TestSignalMessage:

    def test_offer_requires_welcome_message(self, fixed):
        with pytest.raises(ValueError):
            SignalMessage('Offer', fixed.blob(2048, 0), 'a', 'b')

    def test_answer_rejects_welcome_message(self, fixed):
        with pytest.raises(ValueError):
            SignalMessage('Answer', fixed.blob(2048, 0), 'a', 'b', fixed.blob(300, 0))

    def test_unknown_kind(self, fixed):
        with pytest.raises(ValueError):
            SignalMessage('Hangup', fixed.blob(2048, 0), 'a', 'b')


class TestEventBridgeTransport:

    def test_publish_sends_single_entry(self, fixed):
        client = MagicMock()
        client.put_events.return_value = {'FailedEntryCount': 0, 'Entries': [{'EventId': '1'}]}
        transport = EventBridgeTransport('bus-test', 'source-test', client=client)
        message = SignalMessage.answer('identity-b', fixed.blob(2048, 1), 'identity-a')

        transport.publish(message)

        entries = client.put_events.call_args.kwargs['Entries']
        assert len(entries) == 1
        assert entries[0]['EventBusName'] == 'bus-test'
        assert entries[0]['Source'] == 'source-test'
        assert entries[0]['DetailType'] == 'Answer'
        assert json.loads(entries[0]['Detail']) == message.to_event()

    def test_failed_entry_raises(self, fixed):
        client = MagicMock()
        client.put_events.return_value = {
            'FailedEntryCount': 1,
            'Entries': [{'ErrorCode': 'InternalFailure', 'ErrorMessage': 'boom'}]
        }
        transport = EventBridgeTransport('bus-test', client=client)

        with pytest.raises(NotificationDeliveryError) as exc_info:
            transport.publish(SignalMessage.answer('a', fixed.blob(2048, 1), 'b'))

        assert exc_info.value.details['kind'] == 'Answer'

    def test_client_error_raises(self, fixed):
        client = MagicMock()
        client.put_events.side_effect = ClientError(
            {'Error': {'Code': 'ResourceNotFoundException', 'Message': 'no bus'}},
            'PutEvents'
        )
        transport = EventBridgeTransport('bus-test', client=client)

        with pytest.raises(NotificationDeliveryError):
            transport.publish(SignalMessage.answer('a', fixed.blob(2048, 1), 'b'))

    def test_publish_against_mocked_event_bus(self, mock_aws_services, fixed):
        channel = SignalChannel(EventBridgeTransport())

        message = channel.offer('identity-a', fixed.blob(300, 1), fixed.blob(2048, 2), 'identity-b')

        assert message.kind == 'Offer'
