"""
Отчёты по контактам

Потребитель ContactMethod: каждый вариант обрабатывается явно через
match_contact_method. Добавление нового варианта без обработчика здесь:
ошибка type checker и TypeError при вызове.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from contact_domain.core.domain.contact import Contact
from contact_domain.core.domain.contact_method import (
    ContactMethodVariant,
    contact_method_kinds,
    match_contact_method,
)
from contact_domain.core.domain.contact_payloads import PhoneContactInfo


def _phone_line(label: str, info: PhoneContactInfo) -> str:
    status = "verified" if info.is_phone_verified else "unverified"
    return f"{label}: {info.phone_number} ({status})"


def describe_contact_method(method: ContactMethodVariant) -> str:
    """Одна строка отчёта на способ связи."""
    return match_contact_method(
        method,
        on_email=lambda info: (
            f"Email: {info.email_address} "
            f"({'verified' if info.is_email_verified else 'unverified'})"
        ),
        on_postal=lambda info: (
            f"Post: {', '.join(info.address.lines())} "
            f"({'valid' if info.is_address_valid else 'unchecked'})"
        ),
        on_home_phone=lambda info: _phone_line("Home phone", info),
        on_work_phone=lambda info: _phone_line("Work phone", info),
    )


def is_confirmed(method: ContactMethodVariant) -> bool:
    """Подтверждён ли способ связи (флаг своей нагрузки)."""
    return match_contact_method(
        method,
        on_email=lambda info: info.is_email_verified,
        on_postal=lambda info: info.is_address_valid,
        on_home_phone=lambda info: info.is_phone_verified,
        on_work_phone=lambda info: info.is_phone_verified,
    )


@dataclass(frozen=True)
class ContactReport:
    """Отчёт по одному контакту."""

    full_name: str
    lines: tuple[str, ...]
    confirmed_count: int
    total_count: int

    def render(self) -> str:
        body = "\n".join(f"  {line}" for line in self.lines)
        return f"{self.full_name} ({self.confirmed_count}/{self.total_count} confirmed)\n{body}"


def build_contact_report(contact: Contact) -> ContactReport:
    """Основной способ первым, с пометкой '*'."""
    methods = contact.all_contact_methods()
    lines = [f"* {describe_contact_method(contact.primary_contact_method)}"]
    lines.extend(f"- {describe_contact_method(m)}" for m in contact.secondary_contact_methods)
    return ContactReport(
        full_name=contact.name.full_name(),
        lines=tuple(lines),
        confirmed_count=sum(1 for m in methods if is_confirmed(m)),
        total_count=len(methods),
    )


def count_methods_by_kind(contacts: Iterable[Contact]) -> dict[str, int]:
    """
    Сколько способов связи каждого вида во всех контактах.

    Все виды присутствуют в ответе, даже с нулём.
    """
    counts = Counter({kind: 0 for kind in contact_method_kinds()})
    for contact in contacts:
        for method in contact.all_contact_methods():
            counts[method.kind] += 1
    return dict(counts)
