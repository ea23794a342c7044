"""
Загрузка Contact из сырой записи

Граница системы: форма записи проверяется по contact.json, затем каждое
значение строится через smart constructors. Ошибки всех полей собираются
в один Failure; исключения наружу не выходят.

dump_contact: обратное преобразование: запись, которую load_contact примет.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

from contact_domain.core.config import ValidationConfig
from contact_domain.core.contracts.validators import ContactRecordValidator
from contact_domain.core.domain.contact import Contact
from contact_domain.core.domain.contact_method import (
    ContactMethodVariant,
    EmailMethod,
    HomePhoneMethod,
    PostalMethod,
    WorkPhoneMethod,
    match_contact_method,
)
from contact_domain.core.domain.contact_payloads import (
    EmailContactInfo,
    PhoneContactInfo,
    PostalAddress,
    PostalContactInfo,
)
from contact_domain.core.domain.personal_name import PersonalName
from contact_domain.core.domain.primitives import EmailAddress, PhoneNumber
from contact_domain.core.result import (
    Failure,
    Result,
    Success,
    ValidationFailure,
    collect_failures,
    prefix_failure,
    with_field,
)


logger = logging.getLogger(__name__)

MethodLoader = Callable[
    [Dict[str, Any], Optional[ValidationConfig]], Result[ContactMethodVariant]
]


# =============================================================================
# METHOD LOADERS (по тегу kind)
# =============================================================================


def _load_email(
    raw: Dict[str, Any], config: Optional[ValidationConfig]
) -> Result[ContactMethodVariant]:
    return with_field(
        EmailAddress.create(raw["email_address"], config=config), "email_address"
    ).map(
        lambda email: EmailMethod(
            info=EmailContactInfo(
                email_address=email,
                is_email_verified=raw.get("is_email_verified", False),
            )
        )
    )


def _load_postal(
    raw: Dict[str, Any], config: Optional[ValidationConfig]
) -> Result[ContactMethodVariant]:
    address = raw["address"]
    built = PostalAddress.create(
        address1=address["address1"],
        address2=address.get("address2"),
        city=address["city"],
        state=address["state"],
        zip=address["zip"],
        config=config,
    )
    return prefix_failure(built, "address").map(
        lambda postal: PostalMethod(
            info=PostalContactInfo(
                address=postal,
                is_address_valid=raw.get("is_address_valid", False),
            )
        )
    )


def _phone_loader(
    variant: Callable[..., ContactMethodVariant],
) -> MethodLoader:
    def load(
        raw: Dict[str, Any], config: Optional[ValidationConfig]
    ) -> Result[ContactMethodVariant]:
        return with_field(
            PhoneNumber.create(raw["phone_number"], config=config), "phone_number"
        ).map(
            lambda number: variant(
                info=PhoneContactInfo(
                    phone_number=number,
                    is_phone_verified=raw.get("is_phone_verified", False),
                )
            )
        )

    return load


METHOD_LOADERS: Dict[str, MethodLoader] = {
    "email": _load_email,
    "postal_address": _load_postal,
    "home_phone": _phone_loader(HomePhoneMethod),
    "work_phone": _phone_loader(WorkPhoneMethod),
}


def _load_name(
    raw: Dict[str, Any], config: Optional[ValidationConfig]
) -> Result[PersonalName]:
    return PersonalName.create(
        first_name=raw["first_name"],
        last_name=raw["last_name"],
        middle_initial=raw.get("middle_initial"),
        config=config,
    )


def _shape_failures(data: Any) -> tuple[ValidationFailure, ...]:
    validator = ContactRecordValidator()
    return tuple(
        ValidationFailure(
            field=".".join(str(p) for p in error.absolute_path),
            message=error.message,
            raw=error.instance,
        )
        for error in validator.iter_errors(data)
    )


# =============================================================================
# PUBLIC API
# =============================================================================


def load_contact(
    data: Any, *, config: Optional[ValidationConfig] = None
) -> Result[Contact]:
    """
    Построение Contact из сырой записи.

    Args:
        data: dict в форме contact.json
        config: Параметры валидации (по умолчанию DEFAULT_VALIDATION_CONFIG)

    Returns:
        Success(Contact) или Failure со всеми ошибками (поле: путь через точку,
        например 'primary_contact_method.email_address')
    """
    shape = _shape_failures(data)
    if shape:
        logger.info("Contact record rejected by schema: %d error(s)", len(shape))
        return Failure(shape)

    name = prefix_failure(_load_name(data["name"], config), "name")
    primary_raw = data["primary_contact_method"]
    primary = prefix_failure(
        METHOD_LOADERS[primary_raw["kind"]](primary_raw, config), "primary_contact_method"
    )
    secondaries = [
        prefix_failure(
            METHOD_LOADERS[raw["kind"]](raw, config), f"secondary_contact_methods.{i}"
        )
        for i, raw in enumerate(data.get("secondary_contact_methods", []))
    ]

    failures = collect_failures(name, primary, *secondaries)
    if failures:
        logger.info("Contact record rejected: %d invalid field(s)", len(failures))
        return Failure(failures)

    return Success(
        Contact.create(
            name=name.value,
            primary=primary.value,
            secondary=[s.value for s in secondaries],
        )
    )


def load_contact_json(
    text: str, *, config: Optional[ValidationConfig] = None
) -> Result[Contact]:
    """load_contact для JSON-строки; невалидный JSON тоже даёт Failure."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return Failure.of("", f"invalid JSON: {e.msg}", text)
    return load_contact(data, config=config)


def dump_method(method: ContactMethodVariant) -> Dict[str, Any]:
    """Способ связи в форме записи contact.json (payload без вложенного info)."""
    payload = match_contact_method(
        method,
        on_email=lambda info: info.model_dump(mode="json"),
        on_postal=lambda info: info.model_dump(mode="json"),
        on_home_phone=lambda info: info.model_dump(mode="json"),
        on_work_phone=lambda info: info.model_dump(mode="json"),
    )
    return {"kind": method.kind, **payload}


def dump_contact(contact: Contact) -> Dict[str, Any]:
    return {
        "name": contact.name.model_dump(mode="json"),
        "primary_contact_method": dump_method(contact.primary_contact_method),
        "secondary_contact_methods": [
            dump_method(m) for m in contact.secondary_contact_methods
        ],
    }
