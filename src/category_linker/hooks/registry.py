"""Hook registry — named extension points for actions and filters.

Callbacks run in ascending priority; callbacks with equal priority run in
registration order. Actions return nothing; filters thread a value through
each callback and return the final value.
"""

from __future__ import annotations

import itertools
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable

from src.common.logging import setup_logging

logger = setup_logging(module_name="category_linker.hooks.registry")

DEFAULT_PRIORITY = 10


@dataclass(order=True)
class _Registration:
    priority: int
    sequence: int
    callback: Callable[..., Any] = field(compare=False)


class HookRegistry:
    """Dispatch table mapping hook names to prioritised callbacks."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[_Registration]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_action(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register a side-effect callback for a hook."""
        self._add(hook, callback, priority)

    def add_filter(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Register a value-transforming callback for a hook."""
        self._add(hook, callback, priority)

    def remove(self, hook: str, callback: Callable[..., Any]) -> bool:
        """Remove a callback from a hook. Returns True if removed."""
        registrations = self._hooks.get(hook, [])
        for registration in registrations:
            if registration.callback == callback:
                registrations.remove(registration)
                return True
        return False

    def has(self, hook: str) -> bool:
        """Whether any callback is registered for a hook."""
        return bool(self._hooks.get(hook))

    def callbacks(self, hook: str) -> list[Callable[..., Any]]:
        """Callbacks for a hook in execution order."""
        return [r.callback for r in self._ordered(hook)]

    def do_action(self, hook: str, *args: Any, **kwargs: Any) -> None:
        """Run every callback registered for a hook."""
        for registration in self._ordered(hook):
            registration.callback(*args, **kwargs)

    def apply_filters(self, hook: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        """Pass a value through every callback registered for a hook.

        Args:
            hook: Hook name
            value: Initial value; each callback receives the previous result
            *args: Extra positional arguments forwarded to every callback

        Returns:
            Final filtered value (the input when nothing is registered)
        """
        for registration in self._ordered(hook):
            value = registration.callback(value, *args, **kwargs)
        return value

    def _add(
        self,
        hook: str,
        callback: Callable[..., Any],
        priority: int,
    ) -> None:
        self._hooks[hook].append(
            _Registration(
                priority=priority,
                sequence=next(self._sequence),
                callback=callback,
            )
        )
        logger.debug("Registered %s on %s (priority %d)", _name_of(callback), hook, priority)

    def _ordered(self, hook: str) -> list[_Registration]:
        return sorted(self._hooks.get(hook, []))


def _name_of(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", type(callback).__name__)
