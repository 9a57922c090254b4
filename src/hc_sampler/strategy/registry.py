"""Registry for selection strategy implementations.

Uses a decorator pattern for registration, enabling both built-in and
third-party strategies to register themselves at import time.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from hc_sampler.config import HCSamplerConfig
    from hc_sampler.strategy.base import SelectionStrategy


class StrategyRegistry:
    """Registry mapping string names to SelectionStrategy classes.

    Built-in strategies register via the ``@StrategyRegistry.register()``
    decorator. The ``build()`` class method instantiates the strategy named
    by the config's ``selection_strategy`` field.
    """

    _registry: ClassVar[dict[str, type[SelectionStrategy]]] = {}

    @classmethod
    def register(
        cls, name: str
    ) -> Callable[[type[SelectionStrategy]], type[SelectionStrategy]]:
        """Decorator that registers a SelectionStrategy class under *name*.

        Args:
            name: Identifier used in config ``selection_strategy``.

        Returns:
            Decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If *name* is already registered.
        """

        def decorator(klass: type[SelectionStrategy]) -> type[SelectionStrategy]:
            if name in cls._registry:
                raise ValueError(f"Selection strategy '{name}' is already registered")
            cls._registry[name] = klass
            return klass

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SelectionStrategy]:
        """Return the strategy class registered under *name*.

        Args:
            name: Identifier to look up.

        Returns:
            The registered SelectionStrategy subclass.

        Raises:
            KeyError: If *name* is not registered.
        """
        if name not in cls._registry:
            available = ", ".join(sorted(cls._registry)) or "(none)"
            raise KeyError(f"Unknown selection strategy '{name}'. Available: {available}")
        return cls._registry[name]

    @classmethod
    def build(cls, config: HCSamplerConfig) -> SelectionStrategy:
        """Instantiate the strategy specified by *config.selection_strategy*.

        Args:
            config: Config providing ``selection_strategy`` and the
                strategy's parameter field.

        Returns:
            A fully constructed SelectionStrategy instance.

        Raises:
            KeyError: If the strategy name is not registered.
            InvalidArgumentError: If the strategy parameter is out of range.
        """
        klass = cls.get(config.selection_strategy)
        return klass.from_config(config)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted list of registered strategy names."""
        return sorted(cls._registry)
