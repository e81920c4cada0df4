"""Kernel messaging – message value object and serializers."""
from mp_hermes.kernel.messaging.message import Message, MessageId, MessageSerializer
from mp_hermes.kernel.messaging.serializer import JsonMessageSerializer

__all__ = ["JsonMessageSerializer", "Message", "MessageId", "MessageSerializer"]
