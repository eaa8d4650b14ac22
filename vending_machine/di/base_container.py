# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal dependency injection container.

    Keys are usually classes (interfaces or use cases) but plain strings are
    accepted for infrastructure handles such as database collections.
    Singletons are returned as-is; factories build a new instance per lookup.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance under key"""
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a zero-argument factory called on every lookup of key"""
        self._factories[key] = factory

    def get(self, key: Any) -> Any:
        """
        Resolve a dependency

        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
