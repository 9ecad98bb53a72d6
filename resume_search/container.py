import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TypeVar

from .config.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Container:
    _factories: dict[type, Callable[[], Any]] = field(default_factory=dict)
    _singletons: dict[type, Any] = field(default_factory=dict)
    _singleton_flags: set[type] = field(default_factory=set)

    def register(
        self, interface: type[T], factory: Callable[[], T], singleton: bool = False
    ) -> None:
        """Register factory for interface.

        Args:
            interface: Interface type.
            factory: Factory function.
            singleton: Whether to cache instance.
        """
        self._factories[interface] = factory
        self._singletons.pop(interface, None)
        if singleton:
            self._singleton_flags.add(interface)
        else:
            self._singleton_flags.discard(interface)

    def resolve(self, interface: type[T]) -> T:
        if interface in self._singletons:
            return self._singletons[interface]

        if interface not in self._factories:
            raise KeyError(f"No factory registered for {interface}")

        instance = self._factories[interface]()

        if interface in self._singleton_flags:
            self._singletons[interface] = instance

        return instance

    def reset(self) -> None:
        """Reset singletons (for testing)."""
        self._singletons.clear()


container = Container()


def configure_container(
    settings: Settings,
    notifier_factory: Optional[Callable[[], Any]] = None,
) -> Container:
    """Configure container with all dependencies.

    Args:
        settings: Application settings.
        notifier_factory: Builds the notifier for feedback outcomes.
            Defaults to logging notifications.

    Returns:
        Configured container.
    """
    from .core.protocols.notifier import NotifierProtocol
    from .core.protocols.search_api import SearchApiProtocol
    from .core.protocols.storage import KeyValueStorageProtocol
    from .core.services.feedback_service import FeedbackSubmitter
    from .core.services.preference_store import DisplayPreferenceStore
    from .core.services.session_controller import SearchSessionController
    from .infrastructure.api.search_api_client import SearchApiClient
    from .infrastructure.notifiers.logging_notifier import LoggingNotifier
    from .infrastructure.storage.json_storage import JsonFileStorage

    container.register(
        SearchApiProtocol,
        lambda: SearchApiClient(base_url=settings.api_url, api_key=settings.api_key),
        singleton=True,
    )

    container.register(
        KeyValueStorageProtocol,
        lambda: JsonFileStorage(settings.preferences_path),
        singleton=True,
    )

    container.register(NotifierProtocol, notifier_factory or LoggingNotifier)

    # Per-session objects: a new instance on every resolve.
    container.register(
        SearchSessionController,
        lambda: SearchSessionController(
            api=container.resolve(SearchApiProtocol),
            top_k=settings.default_top_k,
            rerank=settings.default_rerank,
        ),
    )

    container.register(
        FeedbackSubmitter,
        lambda: FeedbackSubmitter(
            api=container.resolve(SearchApiProtocol),
            notifier=container.resolve(NotifierProtocol),
        ),
    )

    container.register(
        DisplayPreferenceStore,
        lambda: DisplayPreferenceStore(
            storage=container.resolve(KeyValueStorageProtocol),
            key=settings.dark_mode_key,
        ),
    )

    logger.info(f"Container configured for {settings.api_url}")
    return container
