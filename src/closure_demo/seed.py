"""Seed loading — alternative record sets for :func:`create_registry`.

A seed document is YAML (``.yaml`` / ``.yml``) or JSON::

    records:
      - {id: 1, name: owl, verse: hoot}
      - {id: 2, name: cat, verse: meow}

Documents are checked against ``registry_seed.schema.json``; ids must be
unique, which JSON Schema cannot express, so that is checked here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from closure_demo.contracts.load import SEED_SCHEMA, validate_instance
from closure_demo.model import Record, check_unique_ids

_logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def parse_seed(data: Any) -> tuple[Record, ...]:
    """Validate a decoded seed document and turn it into records.

    Raises ``jsonschema.ValidationError`` for malformed documents and
    ``ValueError`` for duplicate ids.
    """
    validate_instance(data, SEED_SCHEMA)
    records = tuple(Record.from_dict(item) for item in data["records"])
    check_unique_ids(records)
    return records


def load_seed(path: Path) -> tuple[Record, ...]:
    """Read and validate a seed file."""
    if not path.exists():
        raise FileNotFoundError(f"seed file does not exist: {path}")

    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        data = yaml.safe_load(text) or {}
    else:
        data = json.loads(text)

    records = parse_seed(data)
    _logger.info("Loaded %d seed record(s) from %s", len(records), path)
    return records
