from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying context fields that are attached to every event."""

    def info(self, event: str, **kwargs: Any) -> None: ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error event.

        Args:
            event: Event name
            exc_info: Attach the exception currently being handled
            **kwargs: Additional context fields
        """
        ...


class LoggingPort(Protocol):
    """Entry point used by DAOs and services to obtain a bound logger."""

    def bind(self, **kwargs: Any) -> BoundLogger: ...
