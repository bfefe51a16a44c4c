"""
Dough profile contract

Persisted dough profiles are plain JSON records. Before a record is turned
into a DoughProfile it is checked against contracts/schema/dough_profile.json
(jsonschema, Draft 2020-12), so a file edited by hand fails with the exact
offending field instead of a half-built plan.

Schemas:
- dough_profile.json (flat profile record, see DoughProfile)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

# contracts/schema/ at the project root (src/core/contracts/ -> root)
DEFAULT_SCHEMA_DIR: Path = Path(__file__).resolve().parents[3] / "contracts" / "schema"

DOUGH_PROFILE_SCHEMA: str = "dough_profile"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Reads and meta-validates schema files from one directory.

    Parsed schemas are cached per loader.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load `<schema_name>.json` from the schema directory.

        Raises:
            FileNotFoundError: If there is no such schema
            ValueError: If the file is not a valid Draft 2020-12 schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def _default_loader() -> SchemaLoader:
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Checks records against one named schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: For the most relevant violation in `data`
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """All violations, in schema order."""
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """Human readable violations, one per line, sorted by field."""
        messages = []
        for error in self.validator.iter_errors(data):
            location = ".".join(str(p) for p in error.absolute_path) or "(record)"
            messages.append(f"{location}: {error.message}")
        return sorted(messages)


class DoughProfileValidator(ContractValidator):
    """Validator for persisted dough profiles."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(DOUGH_PROFILE_SCHEMA, loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_dough_profile(data: Dict[str, Any]) -> None:
    """
    Check a raw profile record before it is parsed.

    Raises:
        ValidationError: If the record does not match dough_profile.json
    """
    DoughProfileValidator().validate(data)
