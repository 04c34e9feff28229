from abc import ABC, abstractmethod


class BaseNotifier(ABC):
    """
    Base class for alert delivery channels.
    The dispatcher only depends on this interface, so tests can swap in a fake.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> bool:
        """
        Deliver one message to one recipient.

        Returns:
            bool: True if successful, False if failed
        """
        ...

    @property
    def notifier_type(self) -> str:
        """Return notifier type name for logging"""
        return self.__class__.__name__
