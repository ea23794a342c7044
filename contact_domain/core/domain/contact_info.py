"""
ContactInfo — "email, почта или оба"

Бизнес-правило: у контакта есть email или почтовый адрес (или оба).
Вместо двух опциональных полей (которые допускают состояние "ничего нет")
используется union из трёх вариантов:
- EmailOnly(email)
- PostOnly(postal)
- EmailAndPost(email, postal)

update_postal_address / update_email_address: чистые функции,
которые разбирают все варианты исходного значения.
"""

from typing import Annotated, Callable, Literal, TypeVar, Union

from pydantic import BaseModel, Field

from contact_domain.core.domain.contact_method import unhandled_variant
from contact_domain.core.domain.contact_payloads import EmailContactInfo, PostalContactInfo
from contact_domain.core.domain.personal_name import PersonalName


R = TypeVar("R")


# =============================================================================
# VARIANTS
# =============================================================================


class EmailOnly(BaseModel):
    kind: Literal["email_only"] = "email_only"
    email: EmailContactInfo

    model_config = {"frozen": True}


class PostOnly(BaseModel):
    kind: Literal["post_only"] = "post_only"
    postal: PostalContactInfo

    model_config = {"frozen": True}


class EmailAndPost(BaseModel):
    kind: Literal["email_and_post"] = "email_and_post"
    email: EmailContactInfo
    postal: PostalContactInfo

    model_config = {"frozen": True}


ContactInfoVariant = Union[EmailOnly, PostOnly, EmailAndPost]

ContactInfo = Annotated[ContactInfoVariant, Field(discriminator="kind")]


# =============================================================================
# DISPATCH
# =============================================================================


def match_contact_info(
    info: ContactInfoVariant,
    *,
    on_email_only: Callable[[EmailContactInfo], R],
    on_post_only: Callable[[PostalContactInfo], R],
    on_email_and_post: Callable[[EmailContactInfo, PostalContactInfo], R],
) -> R:
    """Тотальная свёртка по вариантам ContactInfo."""
    match info:
        case EmailOnly(email=email):
            return on_email_only(email)
        case PostOnly(postal=postal):
            return on_post_only(postal)
        case EmailAndPost(email=email, postal=postal):
            return on_email_and_post(email, postal)
        case _:
            return unhandled_variant(info)


def update_postal_address(
    info: ContactInfoVariant, postal: PostalContactInfo
) -> ContactInfoVariant:
    """
    Заменить почтовый адрес.

    EmailOnly -> EmailAndPost (email без изменений)
    PostOnly -> PostOnly (новый адрес)
    EmailAndPost -> EmailAndPost (старый адрес отброшен, email без изменений)
    """
    return match_contact_info(
        info,
        on_email_only=lambda email: EmailAndPost(email=email, postal=postal),
        on_post_only=lambda _old: PostOnly(postal=postal),
        on_email_and_post=lambda email, _old: EmailAndPost(email=email, postal=postal),
    )


def update_email_address(
    info: ContactInfoVariant, email: EmailContactInfo
) -> ContactInfoVariant:
    """Заменить email (симметрично update_postal_address)."""
    return match_contact_info(
        info,
        on_email_only=lambda _old: EmailOnly(email=email),
        on_post_only=lambda postal: EmailAndPost(email=email, postal=postal),
        on_email_and_post=lambda _old, postal: EmailAndPost(email=email, postal=postal),
    )


def email_of(info: ContactInfoVariant) -> EmailContactInfo | None:
    return match_contact_info(
        info,
        on_email_only=lambda email: email,
        on_post_only=lambda _: None,
        on_email_and_post=lambda email, _: email,
    )


def postal_of(info: ContactInfoVariant) -> PostalContactInfo | None:
    return match_contact_info(
        info,
        on_email_only=lambda _: None,
        on_post_only=lambda postal: postal,
        on_email_and_post=lambda _, postal: postal,
    )


# =============================================================================
# CONTACT CARD
# =============================================================================


class ContactCard(BaseModel):
    """Имя + ContactInfo. Без способа связи карточку построить нельзя."""

    name: PersonalName = Field(..., description="Имя контакта")
    contact_info: ContactInfo = Field(..., description="Email, адрес или оба")

    model_config = {"frozen": True}

    def with_postal_address(self, postal: PostalContactInfo) -> "ContactCard":
        return type(self)(
            name=self.name,
            contact_info=update_postal_address(self.contact_info, postal),
        )

    def with_email_address(self, email: EmailContactInfo) -> "ContactCard":
        return type(self)(
            name=self.name,
            contact_info=update_email_address(self.contact_info, email),
        )
