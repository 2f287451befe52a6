"""Write the routes table and render the route reference.

Takes the tidy routes table from routes_builder and produces
routes/routes.json (the routes table) and docs/routes.md (an optional
Markdown reference for readers; nothing consumes it).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jinja2

from .loader import ROOT_DIR
from .routes_builder import count_routes

TEMPLATE_DIR = ROOT_DIR / "templates"
ROUTES_PATH = ROOT_DIR / "routes" / "routes.json"
DOCS_PATH = ROOT_DIR / "docs" / "routes.md"


def dump_routes(routes: dict[str, Any]) -> str:
    """Serialize the routes table: 2-space indent, sorted keys, trailing newline."""
    return f"{json.dumps(routes, indent=2, sort_keys=True)}\n"


def write_routes(routes: dict[str, Any], path: Path | None = None) -> Path:
    """Write the routes table to routes/routes.json."""
    output_path = path or ROUTES_PATH
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_routes(routes))

    print(
        f"Generated {output_path} "
        f"({len(routes)} namespaces, {count_routes(routes)} routes)"
    )
    return output_path


def render_docs(routes: dict[str, Any], template_dir: Path | None = None) -> str:
    """Render the Markdown route reference from templates/routes.md.j2."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("routes.md.j2")
    return template.render(
        namespaces={
            namespace: dict(sorted(methods.items()))
            for namespace, methods in sorted(routes.items())
        },
        route_count=count_routes(routes),
    )


def write_docs(routes: dict[str, Any], path: Path | None = None) -> Path:
    """Render the route reference and write it to docs/routes.md."""
    output_path = path or DOCS_PATH
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_docs(routes))

    print(f"Generated {output_path}")
    return output_path
