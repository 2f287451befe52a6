"""Extract namespaces and method names from the method registry.

Registry shape:
  {"/users/{id}": {"get": {"users": "get", "admin": ""}}}

An empty method name means the namespace has no binding for that
url + http method pair.
"""

from __future__ import annotations

from typing import Any, Iterator

from .naming import uniq


def _iter_bindings(registry: dict[str, Any]) -> Iterator[tuple[str, str]]:
    """Yield (namespace, method_name) for every binding, empty ones included."""
    for methods in registry.values():
        for namespaces in methods.values():
            yield from namespaces.items()


def extract_namespaces(registry: dict[str, Any]) -> list[str]:
    """Return every namespace named in the registry, de-duplicated."""
    return uniq(namespace for namespace, _ in _iter_bindings(registry))


def extract_method_names(registry: dict[str, Any], namespace: str) -> list[str]:
    """Return the method names bound to a namespace, duplicates included."""
    return [
        method_name
        for name, method_name in _iter_bindings(registry)
        if name == namespace and method_name
    ]
