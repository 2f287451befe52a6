"""Build the routes table from the method registry and path specifications.

Pipeline:
  initialize_routes -> one empty Route per namespace method
  merge_specs       -> verb, url, params, accepts, returns from the specs
  tidy_routes       -> plain dicts with every empty field removed

The routes table is passed along and returned by each step; nothing is
kept at module level.
"""

from __future__ import annotations

from typing import Any

from .models import Route
from .naming import get_duplicates, pascal_case, tidy_object, uniq
from .scopes import extract_method_names, extract_namespaces

# Prefix stripped from response schema references before naming the type
_DEFINITIONS_PREFIX = "#/definitions/"

# Responses with a status code below this are successful
_ERROR_STATUS = 400

Routes = dict[str, dict[str, Route]]


class DuplicateMethodNameError(ValueError):
    """A namespace binds the same method name to more than one route."""

    def __init__(self, namespace: str, duplicates: list[str]) -> None:
        self.namespace = namespace
        self.duplicates = duplicates
        super().__init__(
            f"Duplicate method names [{', '.join(duplicates)}] in namespace [{namespace}]"
        )


def initialize_routes(registry: dict[str, Any]) -> Routes:
    """Create an empty Route for every method name of every namespace."""
    routes: Routes = {}
    for namespace in extract_namespaces(registry):
        method_names = extract_method_names(registry, namespace)

        duplicates = get_duplicates(method_names)
        if duplicates:
            raise DuplicateMethodNameError(namespace, duplicates)

        routes[namespace] = {name: Route() for name in uniq(method_names)}
    return routes


def _is_success(code: str) -> bool:
    """Check if a response code is a numeric success code ('default' is not)."""
    try:
        return int(code) < _ERROR_STATUS
    except ValueError:
        return False


def _set_returns(route: Route, responses: dict[str, Any]) -> None:
    """Set the return type from the last success response with a schema $ref."""
    for code, response in responses.items():
        if not _is_success(code):
            continue
        schema = (response or {}).get("schema") or {}
        ref = schema.get("$ref")
        if not ref:
            continue
        route.returns = pascal_case(ref.replace(_DEFINITIONS_PREFIX, ""))


def _apply_operation(route: Route, operation: dict[str, Any]) -> None:
    """Merge one http method descriptor (consumes, parameters, responses)."""
    route.add_consumes(operation.get("consumes", []))
    route.add_parameters(operation.get("parameters", []))
    _set_returns(route, operation.get("responses", {}))


def merge_specs(
    routes: Routes,
    registry: dict[str, Any],
    base_spec: dict[str, Any],
    extras_spec: dict[str, Any],
) -> Routes:
    """Merge the base spec, then the extras overlay, into every bound route."""
    for url, methods in registry.items():
        spec = base_spec.get(url) or {}
        spec_extras = extras_spec.get(url) or {}

        for http_method, namespaces in methods.items():
            operation = spec.get(http_method)
            operation_extras = spec_extras.get(http_method)

            for namespace, method_name in namespaces.items():
                # Empty method name: no binding for this namespace
                if not method_name:
                    continue

                route = routes[namespace][method_name]
                route.method = http_method.upper()
                route.url = url

                route.add_parameters(spec.get("parameters", []))
                if operation:
                    _apply_operation(route, operation)
                if operation_extras:
                    _apply_operation(route, operation_extras)
    return routes


def _tidy(value: Any) -> Any:
    """Tidy nested mappings depth-first so emptied children are dropped too."""
    if not isinstance(value, dict):
        return value
    return tidy_object({key: _tidy(child) for key, child in value.items()})


def tidy_routes(routes: Routes) -> dict[str, Any]:
    """Convert routes to plain dicts and strip every empty field."""
    return _tidy({
        namespace: {name: route.as_dict() for name, route in methods.items()}
        for namespace, methods in routes.items()
    })


def build_routes(
    registry: dict[str, Any],
    base_spec: dict[str, Any],
    extras_spec: dict[str, Any],
) -> dict[str, Any]:
    """Run the full pipeline and return the tidy routes table."""
    routes = initialize_routes(registry)
    routes = merge_specs(routes, registry, base_spec, extras_spec)
    return tidy_routes(routes)


def count_routes(routes: dict[str, Any]) -> int:
    """Count the method entries across all namespaces of a routes table."""
    return sum(len(methods) for methods in routes.values())
