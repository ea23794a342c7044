"""
Contact — Контакт с гарантией "хотя бы один способ связи"

Инвариант обеспечивается формой данных: primary_contact_method обязателен
(без значения по умолчанию), secondary_contact_methods: упорядоченная,
возможно пустая последовательность. Ни одна операция не может построить
Contact без способов связи.

Все операции возвращают новый Contact.
"""

from typing import Callable

from pydantic import BaseModel, Field

from contact_domain.core.domain.contact_method import (
    ContactMethod,
    ContactMethodVariant,
    EmailMethod,
    PostalMethod,
    match_contact_method,
)
from contact_domain.core.domain.contact_payloads import EmailContactInfo, PostalContactInfo
from contact_domain.core.domain.personal_name import PersonalName


def _email_payload(method: ContactMethodVariant) -> EmailContactInfo | None:
    return match_contact_method(
        method,
        on_email=lambda info: info,
        on_postal=lambda _: None,
        on_home_phone=lambda _: None,
        on_work_phone=lambda _: None,
    )


def _postal_payload(method: ContactMethodVariant) -> PostalContactInfo | None:
    return match_contact_method(
        method,
        on_email=lambda _: None,
        on_postal=lambda info: info,
        on_home_phone=lambda _: None,
        on_work_phone=lambda _: None,
    )


def _is_email(method: ContactMethodVariant) -> bool:
    return _email_payload(method) is not None


def _is_postal(method: ContactMethodVariant) -> bool:
    return _postal_payload(method) is not None


class Contact(BaseModel):
    """
    Контакт: имя + основной способ связи + дополнительные способы.

    Immutable модель (frozen=True). Каждая операция строит новый экземпляр
    через конструктор модели, поэтому способы связи проходят ту же валидацию
    discriminated union, что и в create.
    """

    name: PersonalName = Field(..., description="Имя контакта")
    primary_contact_method: ContactMethod = Field(..., description="Основной способ связи")
    secondary_contact_methods: tuple[ContactMethod, ...] = Field(
        default_factory=tuple, description="Дополнительные способы связи (по порядку)"
    )

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        name: PersonalName,
        primary: ContactMethodVariant,
        secondary: "tuple[ContactMethodVariant, ...] | list[ContactMethodVariant]" = (),
    ) -> "Contact":
        return cls(
            name=name,
            primary_contact_method=primary,
            secondary_contact_methods=tuple(secondary),
        )

    def _rebuild(
        self,
        primary: ContactMethodVariant | None = None,
        secondary: "tuple[ContactMethodVariant, ...] | list[ContactMethodVariant] | None" = None,
    ) -> "Contact":
        return type(self)(
            name=self.name,
            primary_contact_method=self.primary_contact_method if primary is None else primary,
            secondary_contact_methods=(
                self.secondary_contact_methods if secondary is None else tuple(secondary)
            ),
        )

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    def all_contact_methods(self) -> tuple[ContactMethodVariant, ...]:
        """Основной способ, затем дополнительные. Никогда не пусто."""
        return (self.primary_contact_method, *self.secondary_contact_methods)

    def contact_method_count(self) -> int:
        return 1 + len(self.secondary_contact_methods)

    def email_contact_info(self) -> EmailContactInfo | None:
        """Первый email (основной проверяется первым) или None."""
        for method in self.all_contact_methods():
            info = _email_payload(method)
            if info is not None:
                return info
        return None

    def postal_contact_info(self) -> PostalContactInfo | None:
        """Первый почтовый адрес или None."""
        for method in self.all_contact_methods():
            info = _postal_payload(method)
            if info is not None:
                return info
        return None

    # -------------------------------------------------------------------------
    # Перестановки primary / secondary
    # -------------------------------------------------------------------------

    def promote_secondary(self, index: int) -> "Contact":
        """
        Сделать дополнительный способ с индексом index основным.

        Старый основной способ встаёт на освободившуюся позицию,
        общее число способов не меняется.

        Raises:
            IndexError: Если index вне диапазона дополнительных способов
        """
        secondaries = list(self.secondary_contact_methods)
        if not 0 <= index < len(secondaries):
            raise IndexError(
                f"secondary index {index} out of range (have {len(secondaries)})"
            )

        promoted = secondaries[index]
        secondaries[index] = self.primary_contact_method
        return self._rebuild(primary=promoted, secondary=secondaries)

    def demote_primary(self, new_primary: ContactMethodVariant) -> "Contact":
        """
        Новый основной способ; старый уходит в конец дополнительных.

        Raises:
            ValidationError: Если new_primary не способ связи
        """
        return type(self)(
            name=self.name,
            primary_contact_method=new_primary,
            secondary_contact_methods=(
                *self.secondary_contact_methods,
                self.primary_contact_method,
            ),
        )

    def replace_primary(self, new_primary: ContactMethodVariant) -> "Contact":
        """Заменить основной способ (старый отбрасывается)."""
        return type(self)(
            name=self.name,
            primary_contact_method=new_primary,
            secondary_contact_methods=self.secondary_contact_methods,
        )

    def add_secondary(self, method: ContactMethodVariant) -> "Contact":
        return self._rebuild(secondary=(*self.secondary_contact_methods, method))

    def remove_secondary(self, index: int) -> "Contact":
        """
        Удалить дополнительный способ.

        Основной способ удалить нельзя: такой операции нет.
        """
        secondaries = list(self.secondary_contact_methods)
        if not 0 <= index < len(secondaries):
            raise IndexError(
                f"secondary index {index} out of range (have {len(secondaries)})"
            )
        del secondaries[index]
        return self._rebuild(secondary=secondaries)

    # -------------------------------------------------------------------------
    # Замена полезной нагрузки
    # -------------------------------------------------------------------------

    def _replace_first(
        self,
        matches: Callable[[ContactMethodVariant], bool],
        replacement: ContactMethodVariant,
    ) -> "Contact":
        if matches(self.primary_contact_method):
            return self.replace_primary(replacement)

        secondaries = list(self.secondary_contact_methods)
        for i, method in enumerate(secondaries):
            if matches(method):
                secondaries[i] = replacement
                return self._rebuild(secondary=secondaries)

        return self.add_secondary(replacement)

    def with_postal_contact_info(self, info: PostalContactInfo) -> "Contact":
        """
        Заменить первый почтовый адрес или добавить его дополнительным.

        Остальные способы связи (в т.ч. email и его флаг) не меняются.
        """
        return self._replace_first(_is_postal, PostalMethod(info=info))

    def with_email_contact_info(self, info: EmailContactInfo) -> "Contact":
        """Заменить первый email или добавить его дополнительным."""
        return self._replace_first(_is_email, EmailMethod(info=info))
