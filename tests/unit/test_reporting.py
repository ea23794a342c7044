"""
Тесты для отчётов по контактам

Каждый вариант ContactMethod даёт свою строку отчёта; подсчёт по видам
включает все виды union.
"""

import pytest

from contact_domain.core.domain import (
    Contact,
    EmailContactInfo,
    EmailMethod,
    HomePhoneMethod,
    PersonalName,
    PhoneContactInfo,
    PostalAddress,
    PostalContactInfo,
    PostalMethod,
    WorkPhoneMethod,
    contact_method_kinds,
)
from contact_domain.reporting import (
    build_contact_report,
    count_methods_by_kind,
    describe_contact_method,
    is_confirmed,
)


@pytest.fixture
def contact() -> Contact:
    address = PostalAddress.create(
        address1="1 Main St", address2="Apt 4", city="Springfield", state="IL", zip="62701"
    ).unwrap()
    return Contact.create(
        PersonalName.create("Jane", "Doe", middle_initial="Q").unwrap(),
        EmailMethod(info=EmailContactInfo.create("jane@example.com").unwrap().mark_verified()),
        [
            PostalMethod(info=PostalContactInfo(address=address)),
            HomePhoneMethod(info=PhoneContactInfo.create("555-123-4567").unwrap()),
            WorkPhoneMethod(info=PhoneContactInfo.create("555-765-4321").unwrap().mark_verified()),
        ],
    )


class TestDescribeContactMethod:
    def test_each_variant(self, contact: Contact) -> None:
        lines = [describe_contact_method(m) for m in contact.all_contact_methods()]
        assert lines == [
            "Email: jane@example.com (verified)",
            "Post: 1 Main St, Apt 4, Springfield IL 62701 (unchecked)",
            "Home phone: 555-123-4567 (unverified)",
            "Work phone: 555-765-4321 (verified)",
        ]

    def test_is_confirmed(self, contact: Contact) -> None:
        assert [is_confirmed(m) for m in contact.all_contact_methods()] == [
            True,
            False,
            False,
            True,
        ]


class TestContactReport:
    def test_report(self, contact: Contact) -> None:
        report = build_contact_report(contact)
        assert report.full_name == "Jane Q. Doe"
        assert report.total_count == 4
        assert report.confirmed_count == 2
        assert report.lines[0] == "* Email: jane@example.com (verified)"
        assert all(line.startswith("- ") for line in report.lines[1:])

    def test_render(self, contact: Contact) -> None:
        rendered = build_contact_report(contact).render()
        assert rendered.splitlines()[0] == "Jane Q. Doe (2/4 confirmed)"
        assert len(rendered.splitlines()) == 5


class TestCountMethodsByKind:
    def test_counts_all_kinds(self, contact: Contact) -> None:
        single = Contact.create(contact.name, contact.primary_contact_method)
        counts = count_methods_by_kind([contact, single])
        assert counts == {
            "email": 2,
            "postal_address": 1,
            "home_phone": 1,
            "work_phone": 1,
        }

    def test_empty_input_lists_every_kind(self) -> None:
        assert count_methods_by_kind([]) == {kind: 0 for kind in contact_method_kinds()}
