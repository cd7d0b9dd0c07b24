"""JSON Schema generation for taxonomy files."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path  # noqa: TC003

import msgspec

from .models import Taxonomy

SCHEMA_ID = "https://govfeed.example/schemas/taxonomy.json"


def build_taxonomy_schema() -> dict[str, typ.Any]:
    """Build the JSON Schema describing taxonomy files."""
    schema = msgspec.json.schema(Taxonomy)
    schema["$id"] = SCHEMA_ID
    return schema


def write_taxonomy_schema(path: Path) -> Path:
    """Write the JSON Schema to ``path``, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(build_taxonomy_schema(), indent=2), encoding="utf-8")
    return path
