"""
Contract Validation Module

Проверка формы сырых записей (JSON Schema) и загрузка доменных значений.
"""

from .loader import (
    METHOD_LOADERS,
    dump_contact,
    dump_method,
    load_contact,
    load_contact_json,
)
from .validators import (
    ContactRecordValidator,
    ContractValidator,
    SchemaLoader,
    validate_contact_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ContactRecordValidator",
    # Functions
    "validate_contact_record",
    "load_contact",
    "load_contact_json",
    "dump_contact",
    "dump_method",
    "METHOD_LOADERS",
]
