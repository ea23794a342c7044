"""
Result — Результат операции как данные (Success | Failure)

Единственный вид доменной ошибки: ValidationFailure (невалидный примитив).
Ошибка возвращается как значение, а не выбрасывается как исключение.
ContactValidationError нужен только вызывающему коду, который сам выбрал
политику "упасть" (unwrap / create_or_raise).
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union


T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


# =============================================================================
# FAILURE DATA
# =============================================================================


@dataclass(frozen=True)
class ValidationFailure:
    """Описание причины, по которой примитив не прошёл валидацию."""

    field: str
    message: str
    raw: Any = None

    def describe(self) -> str:
        if not self.field:
            return self.message
        return f"{self.field}: {self.message}"


class ContactValidationError(ValueError):
    """Исключение для вызывающего кода, который выбрал политику raise."""

    def __init__(self, failures: "tuple[ValidationFailure, ...]"):
        self.failures = failures
        super().__init__("; ".join(f.describe() for f in failures))


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    """Успешный результат с валидным значением."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        return Success(fn(self.value))

    def bind(self, fn: "Callable[[T], Result[U]]") -> "Result[U]":
        return fn(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def to_optional(self) -> T | None:
        return self.value


@dataclass(frozen=True)
class Failure:
    """
    Неуспешный результат.

    Хранит одну или несколько ValidationFailure (загрузчик записей
    собирает ошибки всех полей сразу).
    """

    failures: tuple[ValidationFailure, ...]

    @classmethod
    def of(cls, field: str, message: str, raw: Any = None) -> "Failure":
        return cls((ValidationFailure(field=field, message=message, raw=raw),))

    @property
    def is_success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """Человекочитаемая причина (все ошибки через '; ')."""
        return "; ".join(f.describe() for f in self.failures)

    def map(self, fn: Callable[[Any], U]) -> "Result[U]":
        return self

    def bind(self, fn: "Callable[[Any], Result[U]]") -> "Result[U]":
        return self

    def unwrap(self):
        raise ContactValidationError(self.failures)

    def unwrap_or(self, default: T) -> T:
        return default

    def to_optional(self) -> None:
        return None


Result = Union[Success[T], Failure]


# =============================================================================
# HELPERS
# =============================================================================


def match_result(
    result: "Result[T]",
    on_success: Callable[[T], R],
    on_failure: Callable[[Failure], R],
) -> R:
    """Свёртка результата: ровно один из обработчиков будет вызван."""
    if isinstance(result, Success):
        return on_success(result.value)
    if isinstance(result, Failure):
        return on_failure(result)
    raise TypeError(f"Not a Result: {type(result).__name__}")


def collect_failures(*results: "Result[Any]") -> tuple[ValidationFailure, ...]:
    """Все ValidationFailure из набора результатов, в порядке следования."""
    collected: list[ValidationFailure] = []
    for result in results:
        if isinstance(result, Failure):
            collected.extend(result.failures)
    return tuple(collected)


def prefix_failure(result: "Result[T]", prefix: str) -> "Result[T]":
    """
    Добавить префикс пути к полям ошибок.

    Используется загрузчиком для путей вида
    'primary_contact_method.email_address'.
    """
    if isinstance(result, Success):
        return result
    return Failure(
        tuple(
            ValidationFailure(
                field=f"{prefix}.{f.field}" if f.field else prefix,
                message=f.message,
                raw=f.raw,
            )
            for f in result.failures
        )
    )


def with_field(result: "Result[T]", field: str) -> "Result[T]":
    """Заменить имя поля в ошибках (имя примитива -> имя поля записи)."""
    if isinstance(result, Success):
        return result
    return Failure(
        tuple(
            ValidationFailure(field=field, message=f.message, raw=f.raw)
            for f in result.failures
        )
    )
