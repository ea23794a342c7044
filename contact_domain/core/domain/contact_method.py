"""
ContactMethod — Способ связи как tagged union

Ровно один из четырёх вариантов:
- EmailMethod(EmailContactInfo)
- PostalMethod(PostalContactInfo)
- HomePhoneMethod(PhoneContactInfo)
- WorkPhoneMethod(PhoneContactInfo)

Каждый вариант: frozen Pydantic модель с тегом kind; объединение:
discriminated union по kind.

Любая обработка ContactMethod идёт через match_contact_method (или match с
unhandled_variant в ветке по умолчанию): при добавлении пятого варианта type checker
сообщит о каждом месте, где он не обработан.
"""

from typing import Annotated, Callable, Literal, Never, TypeVar, Union, get_args

from pydantic import BaseModel, Field

from contact_domain.core.domain.contact_payloads import (
    EmailContactInfo,
    PhoneContactInfo,
    PostalContactInfo,
)


R = TypeVar("R")


# =============================================================================
# VARIANTS
# =============================================================================


class EmailMethod(BaseModel):
    """Связь по email."""

    kind: Literal["email"] = "email"
    info: EmailContactInfo = Field(..., description="Email и флаг верификации")

    model_config = {"frozen": True}


class PostalMethod(BaseModel):
    """Связь по почте."""

    kind: Literal["postal_address"] = "postal_address"
    info: PostalContactInfo = Field(..., description="Адрес и флаг валидности")

    model_config = {"frozen": True}


class HomePhoneMethod(BaseModel):
    """Домашний телефон."""

    kind: Literal["home_phone"] = "home_phone"
    info: PhoneContactInfo = Field(..., description="Домашний номер")

    model_config = {"frozen": True}


class WorkPhoneMethod(BaseModel):
    """Рабочий телефон."""

    kind: Literal["work_phone"] = "work_phone"
    info: PhoneContactInfo = Field(..., description="Рабочий номер")

    model_config = {"frozen": True}


ContactMethodVariant = Union[EmailMethod, PostalMethod, HomePhoneMethod, WorkPhoneMethod]

# Для полей моделей: разбор по тегу kind
ContactMethod = Annotated[ContactMethodVariant, Field(discriminator="kind")]


# =============================================================================
# EXHAUSTIVE DISPATCH
# =============================================================================


def unhandled_variant(value: Never) -> Never:
    """
    Ветка по умолчанию в match по tagged union.

    Статически: аргумент типа Never, поэтому необработанный вариант даёт ошибку
    type checker. В runtime: объект не из union (TypeError).
    """
    raise TypeError(f"Unhandled variant: {type(value).__name__}")


def match_contact_method(
    method: ContactMethodVariant,
    *,
    on_email: Callable[[EmailContactInfo], R],
    on_postal: Callable[[PostalContactInfo], R],
    on_home_phone: Callable[[PhoneContactInfo], R],
    on_work_phone: Callable[[PhoneContactInfo], R],
) -> R:
    """
    Тотальная свёртка по вариантам ContactMethod.

    Все обработчики обязательны: пропуск любого даёт TypeError при вызове
    и ошибка type checker.

    Args:
        method: Способ связи
        on_email: Обработчик EmailContactInfo
        on_postal: Обработчик PostalContactInfo
        on_home_phone: Обработчик PhoneContactInfo домашнего телефона
        on_work_phone: Обработчик PhoneContactInfo рабочего телефона

    Returns:
        Результат вызванного обработчика
    """
    match method:
        case EmailMethod(info=info):
            return on_email(info)
        case PostalMethod(info=info):
            return on_postal(info)
        case HomePhoneMethod(info=info):
            return on_home_phone(info)
        case WorkPhoneMethod(info=info):
            return on_work_phone(info)
        case _:
            return unhandled_variant(method)


def contact_method_variants() -> tuple[type[BaseModel], ...]:
    """Классы всех вариантов в порядке объявления."""
    return get_args(ContactMethodVariant)


def contact_method_kinds() -> tuple[str, ...]:
    """Теги всех вариантов ('email', 'postal_address', ...)."""
    return tuple(variant.model_fields["kind"].default for variant in contact_method_variants())


def is_contact_method(value: object) -> bool:
    return isinstance(value, contact_method_variants())
