from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str
    text: str | None = None


class EmailServiceBase(ABC):
    @abstractmethod
    async def send(self, message: EmailMessage) -> str | None:
        """
        Deliver one message.

        Returns:
            The provider's message id, when the provider reports one.

        Raises on delivery failure.
        """
        pass
