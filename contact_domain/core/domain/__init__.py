"""
Domain models and value objects.

Ограниченные примитивы, полезная нагрузка способов связи, union ContactMethod
и агрегат Contact.
"""

from contact_domain.core.domain.contact import Contact
from contact_domain.core.domain.contact_info import (
    ContactCard,
    ContactInfo,
    ContactInfoVariant,
    EmailAndPost,
    EmailOnly,
    PostOnly,
    email_of,
    match_contact_info,
    postal_of,
    update_email_address,
    update_postal_address,
)
from contact_domain.core.domain.contact_method import (
    ContactMethod,
    ContactMethodVariant,
    EmailMethod,
    HomePhoneMethod,
    PostalMethod,
    WorkPhoneMethod,
    contact_method_kinds,
    contact_method_variants,
    is_contact_method,
    match_contact_method,
    unhandled_variant,
)
from contact_domain.core.domain.contact_payloads import (
    EmailContactInfo,
    PhoneContactInfo,
    PostalAddress,
    PostalContactInfo,
)
from contact_domain.core.domain.personal_name import PersonalName
from contact_domain.core.domain.primitives import (
    EmailAddress,
    PhoneNumber,
    StateCode,
    String1,
    String50,
    ZipCode,
)
from contact_domain.core.domain.validated import VALIDATION_CONFIG_KEY, ValidatedValue

__all__ = [
    # Validated values
    "ValidatedValue",
    "VALIDATION_CONFIG_KEY",
    "String50",
    "String1",
    "EmailAddress",
    "ZipCode",
    "StateCode",
    "PhoneNumber",
    # Records
    "PersonalName",
    "EmailContactInfo",
    "PostalAddress",
    "PostalContactInfo",
    "PhoneContactInfo",
    # ContactMethod union
    "ContactMethod",
    "ContactMethodVariant",
    "EmailMethod",
    "PostalMethod",
    "HomePhoneMethod",
    "WorkPhoneMethod",
    "match_contact_method",
    "contact_method_kinds",
    "contact_method_variants",
    "is_contact_method",
    "unhandled_variant",
    # Aggregate
    "Contact",
    # ContactInfo union
    "ContactInfo",
    "ContactInfoVariant",
    "EmailOnly",
    "PostOnly",
    "EmailAndPost",
    "ContactCard",
    "match_contact_info",
    "update_postal_address",
    "update_email_address",
    "email_of",
    "postal_of",
]
