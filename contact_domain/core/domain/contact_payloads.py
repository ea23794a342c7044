"""
Полезная нагрузка способов связи

Поля, которые меняются вместе, сгруппированы в одну сущность:
- EmailContactInfo: адрес + флаг верификации
- PostalContactInfo: адрес + флаг валидности
- PhoneContactInfo: номер + флаг верификации

При замене адреса/номера флаг сбрасывается в False. Сбрасывает его операция
замены (with_*), а не сам тип.
"""

from typing import Optional

from pydantic import BaseModel, Field

from contact_domain.core.config import ValidationConfig
from contact_domain.core.domain.primitives import (
    EmailAddress,
    PhoneNumber,
    StateCode,
    String50,
    ZipCode,
)
from contact_domain.core.result import (
    Failure,
    Result,
    Success,
    collect_failures,
    with_field,
)


# =============================================================================
# EMAIL
# =============================================================================


class EmailContactInfo(BaseModel):
    """Email + флаг верификации."""

    email_address: EmailAddress = Field(..., description="Email-адрес")
    is_email_verified: bool = Field(False, description="Адрес подтверждён владельцем")

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls, email_address: str, *, config: Optional[ValidationConfig] = None
    ) -> Result["EmailContactInfo"]:
        """Неподтверждённый email из сырой строки."""
        return EmailAddress.create(email_address, config=config).map(
            lambda email: cls(email_address=email)
        )

    def with_email_address(self, email_address: EmailAddress) -> "EmailContactInfo":
        """Новый адрес; флаг верификации сбрасывается."""
        return EmailContactInfo(email_address=email_address, is_email_verified=False)

    def mark_verified(self) -> "EmailContactInfo":
        return self.model_copy(update={"is_email_verified": True})


# =============================================================================
# POSTAL
# =============================================================================


class PostalAddress(BaseModel):
    """Почтовый адрес: строки адреса, город, штат, индекс."""

    address1: String50 = Field(..., description="Первая строка адреса")
    address2: Optional[String50] = Field(None, description="Вторая строка адреса")
    city: String50 = Field(..., description="Город")
    state: StateCode = Field(..., description="Код штата (upper)")
    zip: ZipCode = Field(..., description="Индекс (5 цифр)")

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        address1: str,
        city: str,
        state: str,
        zip: str,
        address2: Optional[str] = None,
        *,
        config: Optional[ValidationConfig] = None,
    ) -> Result["PostalAddress"]:
        """
        Построение адреса из сырых строк.

        Собирает ошибки всех полей. Пустой address2 трактуется как отсутствующий.
        """
        line1 = with_field(String50.create(address1, config=config), "address1")
        line2: Result[Optional[String50]] = Success(None)
        if address2 is not None and address2.strip():
            line2 = with_field(String50.create(address2, config=config), "address2")
        city_result = with_field(String50.create(city, config=config), "city")
        state_result = with_field(StateCode.create(state, config=config), "state")
        zip_result = with_field(ZipCode.create(zip, config=config), "zip")

        failures = collect_failures(line1, line2, city_result, state_result, zip_result)
        if failures:
            return Failure(failures)

        return Success(
            cls(
                address1=line1.value,
                address2=line2.value,
                city=city_result.value,
                state=state_result.value,
                zip=zip_result.value,
            )
        )

    def lines(self) -> list[str]:
        """Адрес построчно для печати."""
        result = [self.address1.value]
        if self.address2 is not None:
            result.append(self.address2.value)
        result.append(f"{self.city} {self.state} {self.zip}")
        return result


class PostalContactInfo(BaseModel):
    """Адрес + флаг валидности (адрес проверен почтовой службой)."""

    address: PostalAddress = Field(..., description="Почтовый адрес")
    is_address_valid: bool = Field(False, description="Адрес подтверждён")

    model_config = {"frozen": True}

    def with_address(self, address: PostalAddress) -> "PostalContactInfo":
        """Новый адрес; флаг валидности сбрасывается."""
        return PostalContactInfo(address=address, is_address_valid=False)

    def mark_valid(self) -> "PostalContactInfo":
        return self.model_copy(update={"is_address_valid": True})


# =============================================================================
# PHONE
# =============================================================================


class PhoneContactInfo(BaseModel):
    """Телефон + флаг верификации."""

    phone_number: PhoneNumber = Field(..., description="Номер телефона")
    is_phone_verified: bool = Field(False, description="Номер подтверждён")

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls, phone_number: str, *, config: Optional[ValidationConfig] = None
    ) -> Result["PhoneContactInfo"]:
        return PhoneNumber.create(phone_number, config=config).map(
            lambda number: cls(phone_number=number)
        )

    def with_phone_number(self, phone_number: PhoneNumber) -> "PhoneContactInfo":
        """Новый номер; флаг верификации сбрасывается."""
        return PhoneContactInfo(phone_number=phone_number, is_phone_verified=False)

    def mark_verified(self) -> "PhoneContactInfo":
        return self.model_copy(update={"is_phone_verified": True})
