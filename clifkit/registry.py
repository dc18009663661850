"""A small container of objects that can be injected into command calls."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Iterator

ReduceMethod = Callable[[str, Any], bool]


def _type_name(value: Any) -> str:
    kind = type(value)
    return f"{kind.__module__}.{kind.__qualname__}"


class Registry:
    """Objects registered under their type name or an explicit alias."""

    def __init__(self) -> None:
        self.container: dict[str, Any] = {}

    def register(self, value: Any) -> None:
        """Register ``value`` under its type name, replacing any previous one."""
        self.container[_type_name(value)] = value

    def alias(self, alias: str, value: Any) -> None:
        """Register ``value`` under the given name."""
        self.container[alias] = value

    def get(self, name: str) -> Any:
        """Return the object registered under ``name``, or None."""
        return self.container.get(name)

    def has(self, name: str) -> bool:
        """Return whether something is registered under ``name``."""
        return name in self.container

    def names(self) -> list[str]:
        """Return the registered names in ascending order."""
        return sorted(self.container)

    def reduce(self, callback: ReduceMethod) -> list[Any]:
        """Return the objects for which ``callback(name, value)`` is true, by name order."""
        return [
            self.container[name]
            for name in self.names()
            if callback(name, self.container[name])
        ]

    def reduce_async(self, callback: ReduceMethod) -> Iterator[Any]:
        """Run ``callback`` on all objects concurrently; yield the selected ones.

        The order of the yielded objects is not defined.
        """
        items = list(self.container.items())
        executor = ThreadPoolExecutor()
        futures = {executor.submit(callback, name, value): value for name, value in items}
        executor.shutdown(wait=False)
        return (futures[future] for future in as_completed(futures) if future.result())