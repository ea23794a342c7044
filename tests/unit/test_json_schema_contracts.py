"""
Tests for JSON Schema Contract Validators and the contact loader

Проверяет:
- Валидность самой схемы contact.json
- Детекцию нарушений формы (required поля, типы, неизвестный kind)
- Построение Contact через smart constructors со сбором всех ошибок
- dump_contact -> load_contact
"""

import copy
import json
import logging

import pytest
from jsonschema import ValidationError

from contact_domain.core.contracts import (
    METHOD_LOADERS,
    ContactRecordValidator,
    SchemaLoader,
    dump_contact,
    load_contact,
    load_contact_json,
    validate_contact_record,
)
from contact_domain.core.domain import (
    Contact,
    EmailMethod,
    HomePhoneMethod,
    PostalMethod,
    WorkPhoneMethod,
    contact_method_kinds,
)
from contact_domain.core.config import ValidationConfig
from contact_domain.core.result import Failure, Success


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_record():
    """Валидная запись контакта."""
    return {
        "name": {"first_name": "Jane", "middle_initial": "Q", "last_name": "Doe"},
        "primary_contact_method": {
            "kind": "email",
            "email_address": "jane@example.com",
            "is_email_verified": True,
        },
        "secondary_contact_methods": [
            {
                "kind": "postal_address",
                "address": {
                    "address1": "1 Main St",
                    "address2": None,
                    "city": "Springfield",
                    "state": "il",
                    "zip": "62701",
                },
                "is_address_valid": False,
            },
            {"kind": "home_phone", "phone_number": "555-123-4567"},
            {"kind": "work_phone", "phone_number": "+1 (555) 765-4321", "is_phone_verified": True},
        ],
    }


# =============================================================================
# TESTS - SCHEMA LOADING
# =============================================================================


def test_schema_loader_loads_contact_schema():
    """Схема загружается и проходит meta-validation."""
    schema = SchemaLoader().load_schema("contact")
    assert schema["title"] == "contact"
    assert "primary_contact_method" in schema["required"]


def test_schema_loader_caches_schemas():
    loader = SchemaLoader()
    assert loader.load_schema("contact") is loader.load_schema("contact")


def test_schema_loader_raises_on_missing_schema():
    with pytest.raises(FileNotFoundError):
        SchemaLoader().load_schema("non_existent_schema")


def test_schema_loader_rejects_invalid_schema(tmp_path):
    (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    with pytest.raises(ValueError):
        SchemaLoader(tmp_path).load_schema("broken")


def test_schema_loader_missing_directory(tmp_path):
    with pytest.raises(RuntimeError):
        SchemaLoader(tmp_path / "nope")


def test_schema_loader_lists_schema_names(tmp_path):
    assert SchemaLoader().schema_names() == ["contact"]
    (tmp_path / "b.json").write_text("{}", encoding="utf-8")
    (tmp_path / "a.json").write_text("{}", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("", encoding="utf-8")
    assert SchemaLoader(tmp_path).schema_names() == ["a", "b"]


def test_schema_lists_every_contact_method_kind():
    """Каждый вариант ContactMethod описан в схеме и имеет загрузчик."""
    schema = SchemaLoader().load_schema("contact")
    kinds = {
        definition["properties"]["kind"]["const"]
        for definition in schema["$defs"].values()
        if "kind" in definition.get("properties", {})
    }
    assert kinds == set(contact_method_kinds())
    assert set(METHOD_LOADERS) == set(contact_method_kinds())


# =============================================================================
# TESTS - SHAPE VALIDATION
# =============================================================================


def test_validator_accepts_valid_record(valid_record):
    validator = ContactRecordValidator()
    validator.validate(valid_record)
    assert validator.is_valid(valid_record)
    validate_contact_record(valid_record)


def test_validator_rejects_missing_primary(valid_record):
    data = copy.deepcopy(valid_record)
    del data["primary_contact_method"]

    with pytest.raises(ValidationError) as exc_info:
        validate_contact_record(data)
    assert "'primary_contact_method' is a required property" in str(exc_info.value)


def test_validator_rejects_wrong_type(valid_record):
    data = copy.deepcopy(valid_record)
    data["name"]["first_name"] = 42

    with pytest.raises(ValidationError) as exc_info:
        validate_contact_record(data)
    assert "is not of type 'string'" in str(exc_info.value)


def test_validator_rejects_unknown_kind(valid_record):
    data = copy.deepcopy(valid_record)
    data["primary_contact_method"] = {"kind": "fax", "phone_number": "555-123-4567"}
    assert not ContactRecordValidator().is_valid(data)


def test_validator_rejects_extra_property(valid_record):
    data = copy.deepcopy(valid_record)
    data["nickname"] = "JD"
    assert not ContactRecordValidator().is_valid(data)


# =============================================================================
# TESTS - LOADER
# =============================================================================


class TestLoadContact:
    """load_contact: форма + smart constructors"""

    def test_valid_record(self, valid_record):
        result = load_contact(valid_record)
        assert isinstance(result, Success)
        contact = result.value
        assert contact.name.full_name() == "Jane Q. Doe"
        assert isinstance(contact.primary_contact_method, EmailMethod)
        assert contact.primary_contact_method.info.is_email_verified
        kinds = [type(m) for m in contact.secondary_contact_methods]
        assert kinds == [PostalMethod, HomePhoneMethod, WorkPhoneMethod]
        assert contact.postal_contact_info().address.state.value == "IL"

    def test_secondary_methods_optional(self, valid_record):
        data = copy.deepcopy(valid_record)
        del data["secondary_contact_methods"]
        contact = load_contact(data).unwrap()
        assert contact.contact_method_count() == 1

    def test_missing_primary_is_failure(self, valid_record):
        data = copy.deepcopy(valid_record)
        del data["primary_contact_method"]
        result = load_contact(data)
        assert isinstance(result, Failure)
        assert result.failures[0].field == ""
        assert "primary_contact_method" in result.message

    def test_not_an_object(self):
        result = load_contact(["not", "a", "record"])
        assert isinstance(result, Failure)
        assert "is not of type 'object'" in result.message

    def test_collects_every_invalid_field(self, valid_record):
        data = copy.deepcopy(valid_record)
        data["name"]["first_name"] = ""
        data["primary_contact_method"]["email_address"] = "broken"
        data["secondary_contact_methods"][0]["address"]["zip"] = "1234"
        data["secondary_contact_methods"][0]["address"]["state"] = "XX"
        data["secondary_contact_methods"][2]["phone_number"] = "12"

        result = load_contact(data)
        assert isinstance(result, Failure)
        assert [f.field for f in result.failures] == [
            "name.first_name",
            "primary_contact_method.email_address",
            "secondary_contact_methods.0.address.state",
            "secondary_contact_methods.0.address.zip",
            "secondary_contact_methods.2.phone_number",
        ]
        assert result.failures[1].raw == "broken"

    def test_rejection_is_logged(self, valid_record, caplog):
        data = copy.deepcopy(valid_record)
        data["primary_contact_method"]["email_address"] = "broken"
        with caplog.at_level(logging.INFO, logger="contact_domain"):
            load_contact(data)
        assert "1 invalid field(s)" in caplog.text

    def test_load_contact_json(self, valid_record):
        assert isinstance(load_contact_json(json.dumps(valid_record)).unwrap(), Contact)

    def test_load_contact_json_invalid_json(self):
        result = load_contact_json("{not json")
        assert isinstance(result, Failure)
        assert result.message.startswith("invalid JSON")

    def test_custom_state_codes(self, valid_record):
        data = copy.deepcopy(valid_record)
        data["secondary_contact_methods"][0]["address"]["state"] = "on"
        config = ValidationConfig().with_state_codes(["ON", "QC"])

        contact = load_contact(data, config=config).unwrap()
        postal = contact.postal_contact_info()
        assert postal is not None
        assert postal.address.state.value == "ON"

    def test_custom_state_codes_not_used_by_default(self, valid_record):
        data = copy.deepcopy(valid_record)
        data["secondary_contact_methods"][0]["address"]["state"] = "on"
        result = load_contact(data)
        assert isinstance(result, Failure)
        assert "state" in result.message

    def test_load_contact_json_with_config(self, valid_record):
        config = ValidationConfig(phone_min_digits=11)
        result = load_contact_json(json.dumps(valid_record), config=config)
        assert isinstance(result, Failure)
        assert "phone_number" in result.message


class TestDumpContact:
    def test_dump_matches_schema(self, valid_record):
        contact = load_contact(valid_record).unwrap()
        dumped = dump_contact(contact)
        validate_contact_record(dumped)
        assert dumped["primary_contact_method"] == {
            "kind": "email",
            "email_address": "jane@example.com",
            "is_email_verified": True,
        }
        assert dumped["secondary_contact_methods"][0]["address"]["state"] == "IL"

    def test_dump_then_load(self, valid_record):
        contact = load_contact(valid_record).unwrap()
        assert load_contact(dump_contact(contact)).unwrap() == contact
