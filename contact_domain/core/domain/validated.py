"""
ValidatedValue — Непрозрачная обёртка над валидированным примитивом

Инвариант: обёрнутая строка удовлетворяет предикату своего типа на всё время
жизни значения. Значение неизменяемо.

Создание только через именованные конструкторы:
- create_with_continuations(raw, on_success, on_failure): общая форма
- create(raw) -> Result (Success / Failure с причиной)
- create_optional(raw) -> значение или None (причина теряется)
- create_or_raise(raw) -> значение или ContactValidationError

Прямой вызов конструктора класса запрещён (TypeError).
Невалидный, но корректно типизированный ввод никогда не выбрасывает исключение
в первых трёх формах: ошибка возвращается как данные.
"""

import logging
from typing import Any, Callable, ClassVar, Optional, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from contact_domain.core.config import DEFAULT_VALIDATION_CONFIG, ValidationConfig
from contact_domain.core.result import ContactValidationError, Failure, Result, Success


logger = logging.getLogger(__name__)

V = TypeVar("V", bound="ValidatedValue")
R = TypeVar("R")

# Ключ ValidationConfig в контексте валидации pydantic
VALIDATION_CONFIG_KEY = "validation_config"

# Маркер, без которого конструктор класса не работает
_CONSTRUCTION_TOKEN = object()


def _restore(cls: type, value: str) -> "ValidatedValue":
    """Восстановление при pickle (значение уже было валидным)."""
    return cls._wrap(value)


class ValidatedValue:
    """
    Базовый класс ограниченных примитивов.

    Подкласс задаёт field_name (имя для сообщений об ошибках) и _validate,
    который возвращает нормализованную строку (Success) или причину (Failure).
    """

    __slots__ = ("_value",)

    field_name: ClassVar[str] = "value"

    def __init__(self, value: str, *, _token: object = None):
        if _token is not _CONSTRUCTION_TOKEN:
            raise TypeError(
                f"{type(self).__name__} cannot be constructed directly; "
                f"use {type(self).__name__}.create(...)"
            )
        object.__setattr__(self, "_value", value)

    # -------------------------------------------------------------------------
    # Валидация (переопределяется в подклассах)
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, raw: str, config: ValidationConfig) -> Result[str]:
        raise NotImplementedError

    @classmethod
    def _wrap(cls: type[V], value: str) -> V:
        return cls(value, _token=_CONSTRUCTION_TOKEN)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def create_with_continuations(
        cls: type[V],
        raw: str,
        on_success: Callable[[V], R],
        on_failure: Callable[[str], R],
        *,
        config: Optional[ValidationConfig] = None,
    ) -> R:
        """
        Общая форма конструктора.

        Args:
            raw: Исходная строка
            on_success: Вызывается с построенным значением
            on_failure: Вызывается с сообщением об ошибке
            config: Параметры валидации (по умолчанию DEFAULT_VALIDATION_CONFIG)

        Returns:
            То, что вернул вызванный обработчик

        Raises:
            TypeError: Если raw не строка (ошибка программиста, не валидации)
        """
        if not isinstance(raw, str):
            raise TypeError(
                f"{cls.__name__} expects str, got {type(raw).__name__}"
            )

        checked = cls._validate(raw, config or DEFAULT_VALIDATION_CONFIG)
        if isinstance(checked, Failure):
            message = checked.failures[0].message
            logger.debug("%s rejected %r: %s", cls.__name__, raw, message)
            return on_failure(message)

        return on_success(cls._wrap(checked.value))

    @classmethod
    def create(
        cls: type[V], raw: str, *, config: Optional[ValidationConfig] = None
    ) -> Result[V]:
        """Success(значение) или Failure с причиной."""
        return cls.create_with_continuations(
            raw,
            Success,
            lambda message: Failure.of(cls.field_name, message, raw),
            config=config,
        )

    @classmethod
    def create_optional(
        cls: type[V], raw: str, *, config: Optional[ValidationConfig] = None
    ) -> Optional[V]:
        """Значение или None (без причины)."""
        return cls.create_with_continuations(
            raw, lambda value: value, lambda _message: None, config=config
        )

    @classmethod
    def create_or_raise(
        cls: type[V], raw: str, *, config: Optional[ValidationConfig] = None
    ) -> V:
        """Значение или ContactValidationError (политика "упасть")."""

        def fail(message: str) -> V:
            raise ContactValidationError(Failure.of(cls.field_name, message, raw).failures)

        return cls.create_with_continuations(raw, lambda value: value, fail, config=config)

    # -------------------------------------------------------------------------
    # Доступ и семантика значения
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        """Исходный примитив (операция тотальна)."""
        return self._value

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_restore, (type(self), self._value))

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Поле модели проходит через тот же smart constructor.

        Уже построенные значения принимаются как есть; строки валидируются;
        сериализация пишет исходный примитив. ValidationConfig берётся из
        контекста валидации: model_validate(data, context={VALIDATION_CONFIG_KEY: config}).
        """

        def fail(message: str):
            raise ValueError(f"{cls.field_name}: {message}")

        def validate(raw: Any, info: core_schema.ValidationInfo) -> ValidatedValue:
            if isinstance(raw, cls):
                return raw
            if not isinstance(raw, str):
                raise ValueError(
                    f"{cls.field_name}: expected str, got {type(raw).__name__}"
                )
            config = (info.context or {}).get(VALIDATION_CONFIG_KEY)
            return cls.create_with_continuations(
                raw, lambda value: value, fail, config=config
            )

        return core_schema.with_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.value, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "title": cls.__name__}
