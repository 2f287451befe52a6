"""Route and parameter records for the routes table.

Route collects verb, url, params, accepts and returns for one namespace
method; ParamSchema merges every declaration of one parameter name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .naming import uniq

DEFAULT_PARAM_TYPE = "any"


@dataclass
class ParamSchema:
    """
    Merged schema of one route parameter.

    Built from every declaration of the same parameter name. Defined
    scalar fields of a later declaration win; enum values accumulate.
    """

    type: Optional[str] = None
    enum: list[Any] = field(default_factory=list)
    in_: Optional[str] = None
    required: Optional[bool] = None

    def merge(self, declaration: dict[str, Any]) -> None:
        """Fold a parameter declaration ({name, type, enum, in, required}) in."""
        if declaration.get("type") is not None:
            self.type = declaration["type"]
        if declaration.get("in") is not None:
            self.in_ = declaration["in"]
        if declaration.get("required") is not None:
            self.required = declaration["required"]
        self.enum = uniq(self.enum + list(declaration.get("enum") or []))

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.type or DEFAULT_PARAM_TYPE,
            "enum": list(self.enum),
            "in": self.in_,
            "required": self.required,
        }


@dataclass
class Route:
    """One namespace method: how to call it and what it returns."""

    method: str = ""            # GET, POST, ...
    url: str = ""               # /users/{id}
    params: dict[str, ParamSchema] = field(default_factory=dict)
    accepts: list[str] = field(default_factory=list)
    returns: Optional[str] = None

    def add_parameters(self, parameters: list[dict[str, Any]]) -> None:
        for declaration in parameters:
            schema = self.params.setdefault(declaration["name"], ParamSchema())
            schema.merge(declaration)

    def add_consumes(self, consumes: list[str]) -> None:
        self.accepts = uniq(self.accepts + list(consumes))

    def as_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "url": self.url,
            "params": {name: schema.as_dict() for name, schema in self.params.items()},
            "accepts": list(self.accepts),
            "returns": self.returns,
        }
