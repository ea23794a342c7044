"""
JSON Schema Contract Validators

Проверка формы сырых записей (dict из JSON) до построения доменных значений.
Форма проверяется библиотекой jsonschema; содержимое строк (email, индекс,
штат) проверяют smart constructors в loader.

Схемы:
- contact.json (запись контакта)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Схемы записей из каталога schema/ пакета (или переданного каталога).

    Каждая схема читается один раз и проходит meta-validation по Draft 2020-12.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def schema_names(self) -> list[str]:
        """Имена доступных схем (без .json), по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против одной JSON Schema."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        """Все ошибки формы, от более мелких путей к более глубоким."""
        return iter(
            sorted(
                self.validator.iter_errors(data),
                key=lambda e: (len(e.absolute_path), [str(p) for p in e.absolute_path]),
            )
        )


class ContactRecordValidator(ContractValidator):
    """Валидатор записи контакта (contact.json)."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("contact", loader)


def validate_contact_record(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запись не соответствует contact.json
    """
    ContactRecordValidator().validate(data)
