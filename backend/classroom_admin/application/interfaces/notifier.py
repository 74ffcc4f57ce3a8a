"""Abstract notifier interface: user-facing toast notifications."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Port: fire-and-forget notifications shown to the user."""

    @abstractmethod
    async def success(self, message: str) -> None:
        ...

    @abstractmethod
    async def error(self, message: str) -> None:
        ...
