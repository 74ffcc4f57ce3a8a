"""Domain-specific exceptions, framework-independent."""


class MalformedInputError(ValueError):
    """Raised when a caller passes an invalid identifier or field set.

    Rejected before any network call is made.
    """

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(f"Invalid {argument}: {message}")


class UnknownResourceError(KeyError):
    """Raised when a resource name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown resource '{name}'")

    def __str__(self) -> str:
        return f"Unknown resource '{self.name}'"


class TransportError(Exception):
    """Raised when the hosted data service cannot complete a request.

    The Apper adapter raises it for non-2xx responses
    and unreadable bodies.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")
