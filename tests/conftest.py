"""Shared fixtures for routes generator tests.

A small registry with its base spec and extras overlay, written as
literal dicts so each test can see exactly what goes in.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Method registry
# ---------------------------------------------------------------------------

_REGISTRY: dict[str, Any] = {
    "/repos/{owner}/{repo}": {
        "get": {"repos": "get", "orgs": ""},
        "patch": {"repos": "update"},
    },
    "/repos/{owner}/{repo}/issues": {
        "get": {"issues": "list", "repos": "listIssues"},
        "post": {"issues": "create"},
    },
    "/ping": {
        "get": {"health": "check"},
    },
}


# ---------------------------------------------------------------------------
# Base specification
# ---------------------------------------------------------------------------

_BASE_SPEC: dict[str, Any] = {
    "/repos/{owner}/{repo}": {
        "parameters": [
            {"name": "owner", "in": "path", "type": "string", "required": True},
            {"name": "repo", "in": "path", "type": "string", "required": True},
        ],
        "get": {
            "responses": {
                "200": {"schema": {"$ref": "#/definitions/repository"}},
                "404": {"schema": {"$ref": "#/definitions/error"}},
            },
        },
        "patch": {
            "consumes": ["application/json"],
            "parameters": [
                {"name": "private", "in": "body", "type": "boolean", "required": False},
            ],
        },
    },
    "/repos/{owner}/{repo}/issues": {
        "get": {
            "parameters": [
                {"name": "state", "in": "query", "type": "string", "enum": ["open", "closed"]},
            ],
            "responses": {
                "200": {"schema": {"$ref": "#/definitions/paginated_issues"}},
            },
        },
        "post": {
            "consumes": ["application/json"],
            "responses": {
                "201": {"schema": {"$ref": "#/definitions/issue"}},
            },
        },
    },
    "/ping": {
        "get": {
            "responses": {
                "200": {"schema": {"$ref": "#/definitions/ping_result"}},
            },
        },
    },
}


# ---------------------------------------------------------------------------
# Extras overlay
# ---------------------------------------------------------------------------

_EXTRAS_SPEC: dict[str, Any] = {
    "/repos/{owner}/{repo}/issues": {
        "get": {
            "parameters": [
                {"name": "state", "enum": ["closed", "all"]},
            ],
        },
        "post": {
            "consumes": ["application/json", "multipart/form-data"],
            "responses": {
                "201": {"schema": {"$ref": "#/definitions/issue_summary"}},
            },
        },
    },
}


@pytest.fixture
def registry() -> dict[str, Any]:
    return copy.deepcopy(_REGISTRY)


@pytest.fixture
def base_spec() -> dict[str, Any]:
    return copy.deepcopy(_BASE_SPEC)


@pytest.fixture
def extras_spec() -> dict[str, Any]:
    return copy.deepcopy(_EXTRAS_SPEC)
