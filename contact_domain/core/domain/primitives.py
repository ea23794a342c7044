"""
Ограниченные примитивы (constrained primitives)

- String50: непустая строка до 50 символов (имена, строки адреса)
- String1: ровно один символ (инициал)
- EmailAddress: соответствует шаблону email, хранится без изменений
- ZipCode: ровно 5 цифр
- StateCode: код штата из разрешённого набора, хранится в верхнем регистре
- PhoneNumber: цифры с '+' и разделителями, 7-15 цифр
"""

import re

from contact_domain.core.config import ValidationConfig
from contact_domain.core.domain.validated import ValidatedValue
from contact_domain.core.result import Failure, Result, Success


class String50(ValidatedValue):
    """Непустая строка ограниченной длины (пробелы по краям отбрасываются)."""

    __slots__ = ()
    field_name = "string50"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        value = raw.strip()
        if not value:
            return Failure.of(cls.field_name, "must not be empty", raw)
        if len(value) > config.max_string_length:
            return Failure.of(
                cls.field_name,
                f"must be at most {config.max_string_length} characters, got {len(value)}",
                raw,
            )
        return Success(value)


class String1(ValidatedValue):
    """Ровно один непробельный символ."""

    __slots__ = ()
    field_name = "string1"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        value = raw.strip()
        if len(value) != 1:
            return Failure.of(cls.field_name, "must be exactly one character", raw)
        return Success(value)


class EmailAddress(ValidatedValue):
    """
    Email-адрес.

    Проверка намеренно простая: '\\S+@\\S+\\.\\S+'. Строка не нормализуется,
    value возвращает исходный ввод.
    """

    __slots__ = ()
    field_name = "email_address"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        if re.fullmatch(config.email_pattern, raw) is None:
            return Failure.of(cls.field_name, f"{raw!r} is not a valid email address", raw)
        return Success(raw)


class ZipCode(ValidatedValue):
    """Почтовый индекс: ровно 5 цифр ASCII."""

    __slots__ = ()
    field_name = "zip"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        if re.fullmatch(config.zip_pattern, raw, flags=re.ASCII) is None:
            return Failure.of(cls.field_name, f"{raw!r} must be exactly 5 digits", raw)
        return Success(raw)


class StateCode(ValidatedValue):
    """Код штата. 'ca' -> 'CA'; код вне разрешённого набора отклоняется."""

    __slots__ = ()
    field_name = "state"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        code = raw.upper()
        if code not in config.state_codes:
            return Failure.of(cls.field_name, f"{raw!r} is not a permitted state code", raw)
        return Success(code)


class PhoneNumber(ValidatedValue):
    """Телефон: необязательный '+', цифры и разделители ' -.()'."""

    __slots__ = ()
    field_name = "phone_number"

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        value = raw.strip()
        if re.fullmatch(config.phone_pattern, value, flags=re.ASCII) is None:
            return Failure.of(cls.field_name, f"{raw!r} contains invalid characters", raw)

        digits = sum(1 for ch in value if ch.isdigit())
        if not config.phone_min_digits <= digits <= config.phone_max_digits:
            return Failure.of(
                cls.field_name,
                f"must contain {config.phone_min_digits}-{config.phone_max_digits} digits, got {digits}",
                raw,
            )
        return Success(value)
