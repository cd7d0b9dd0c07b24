"""YAML loader for taxonomy files."""

from __future__ import annotations

from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import Taxonomy
from .validation import TaxonomyValidationError, validate_taxonomy

YAML_VERSION = (1, 2)


def load_taxonomy(path: Path | str) -> Taxonomy:
    """Parse and validate a YAML taxonomy file."""
    try:
        loaded = _yaml().load(Path(path).read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise TaxonomyValidationError([f"failed to parse YAML: {exc}"]) from exc

    if loaded is None:
        raise TaxonomyValidationError(["taxonomy file is empty"])

    try:
        taxonomy = msgspec.convert(loaded, type=Taxonomy)
    except msgspec.ValidationError as exc:
        raise TaxonomyValidationError([f"schema validation failed: {exc}"]) from exc

    return validate_taxonomy(taxonomy)


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml
