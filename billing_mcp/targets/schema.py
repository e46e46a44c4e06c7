import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from billing_mcp.targets.catalog import ClientTarget, target_metadata

SCHEMAS_DIR = Path(__file__).resolve().parent / "schemas"

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class TargetSchemaRepository:
    def __init__(self, schemas_dir: Path = SCHEMAS_DIR) -> None:
        self.schemas_dir = schemas_dir

    def load_schema(self, target: ClientTarget) -> dict[str, Any]:
        path = self.schemas_dir / target_metadata(target).schema_file
        key = str(path.resolve())
        cached = _SCHEMA_CACHE.get(key)
        if cached is not None:
            return cached
        schema = json.loads(path.read_text(encoding="utf-8"))
        _SCHEMA_CACHE[key] = schema
        return schema


class TargetSchemaValidator:
    def __init__(self, repository: TargetSchemaRepository | None = None) -> None:
        self._repository = repository or TargetSchemaRepository()
        self._validators: dict[ClientTarget, Draft202012Validator] = {}

    def _validator(self, target: ClientTarget) -> Draft202012Validator:
        validator = self._validators.get(target)
        if validator is None:
            validator = Draft202012Validator(self._repository.load_schema(target))
            self._validators[target] = validator
        return validator

    def first_error(self, target: ClientTarget, document: Any) -> str | None:
        error = next(iter(self._validator(target).iter_errors(document)), None)
        if error is None:
            return None
        return format_schema_error(error)
