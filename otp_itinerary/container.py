"""Dependency injection container.

A small registry mapping port types to factories, with optional
singletons. ``Container.create_default`` wires the production adapters;
tests register fakes on an empty Container instead.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(ItineraryService)

        # Testing
        container = Container()
        container.register(OTPTransportPort, lambda: FakeTransport())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(default_factory=dict, repr=False)
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type."""
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with the production adapters registered."""
        from .adapters.cache import InMemoryCache, NullCache
        from .adapters.geometry import CachingGeometryDecoder, PolylineGeometryDecoder
        from .adapters.localization import CatalogLocalizer
        from .adapters.otp import RequestsOTPClient
        from .adapters.rendering import FoliumMapRenderer
        from .ports.cache import CachePort
        from .ports.geometry import GeometryDecoderPort
        from .ports.localization import LocalizerPort
        from .ports.otp import OTPTransportPort
        from .ports.rendering import MapRendererPort
        from .services import ItineraryService

        config = config or get_config()
        container = cls(config=config)

        def create_cache() -> CachePort[Any]:
            if not config.geometry.cache_enabled:
                return NullCache(name="geometry")
            return InMemoryCache(
                name="geometry",
                max_size=config.geometry.cache_max_size,
                default_ttl_seconds=config.geometry.cache_ttl_seconds,
            )

        container.register(CachePort, create_cache)

        def create_decoder() -> GeometryDecoderPort:
            decoder = PolylineGeometryDecoder(precision=config.geometry.precision)
            if not config.geometry.cache_enabled:
                return decoder
            return CachingGeometryDecoder(decoder=decoder, cache=container.resolve(CachePort))

        container.register(GeometryDecoderPort, create_decoder)

        container.register(
            LocalizerPort,
            lambda: CatalogLocalizer(locale=config.display.locale),
        )
        container.register(
            OTPTransportPort,
            lambda: RequestsOTPClient(config=config.otp),
        )
        container.register(MapRendererPort, lambda: FoliumMapRenderer())

        container.register(
            ItineraryService,
            lambda: ItineraryService(
                transport=container.resolve(OTPTransportPort),
                decoder=container.resolve(GeometryDecoderPort),
                localizer=container.resolve(LocalizerPort),
            ),
        )

        return container


_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container, creating it on first use."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Drop the default container so the next call builds a fresh one."""
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
