from .event_publisher import EventPublisherProtocol

__all__ = ["EventPublisherProtocol"]
