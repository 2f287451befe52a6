"""Entry point: python -m routegen

Reads routes/methods-list.json and specification/{,extras/}paths.json,
generates routes/routes.json, then the optional docs/routes.md reference.
"""

from __future__ import annotations

from .loader import load_methods_list, load_paths_spec, load_paths_spec_extras
from .routes_builder import build_routes
from .codegen import write_docs, write_routes

def main() -> None:
    routes = build_routes(
        load_methods_list(),
        load_paths_spec(),
        load_paths_spec_extras(),
    )
    write_routes(routes)
    write_docs(routes)

if __name__ == "__main__":
    main()
