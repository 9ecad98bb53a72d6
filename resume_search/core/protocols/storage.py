"""Key-value storage protocol for dependency injection."""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorageProtocol(Protocol):
    """Protocol for persistent string storage."""

    def get_item(self, key: str) -> Optional[str]:
        """Get raw stored text, None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store raw text under key, replacing any previous value."""
        ...
