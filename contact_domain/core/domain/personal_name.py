"""
PersonalName — Имя контакта

FirstName и LastName обязательны, MiddleInitial опционален.
Межполевых инвариантов нет.
"""

from typing import Optional

from pydantic import BaseModel, Field

from contact_domain.core.config import ValidationConfig
from contact_domain.core.domain.primitives import String1, String50
from contact_domain.core.result import (
    Failure,
    Result,
    Success,
    collect_failures,
    with_field,
)


class PersonalName(BaseModel):
    """Имя: first_name, опциональный middle_initial, last_name."""

    first_name: String50 = Field(..., description="Имя")
    middle_initial: Optional[String1] = Field(None, description="Инициал второго имени")
    last_name: String50 = Field(..., description="Фамилия")

    model_config = {"frozen": True}

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        middle_initial: Optional[str] = None,
        *,
        config: Optional[ValidationConfig] = None,
    ) -> Result["PersonalName"]:
        """
        Построение из сырых строк через smart constructors.

        Возвращает Failure со всеми ошибками полей, а не только первой.
        Пустой middle_initial трактуется как отсутствующий.
        """
        first = with_field(String50.create(first_name, config=config), "first_name")
        last = with_field(String50.create(last_name, config=config), "last_name")
        middle: Result[Optional[String1]] = Success(None)
        if middle_initial is not None and middle_initial.strip():
            middle = with_field(
                String1.create(middle_initial, config=config), "middle_initial"
            )

        failures = collect_failures(first, last, middle)
        if failures:
            return Failure(failures)

        return Success(
            cls(
                first_name=first.value,
                middle_initial=middle.value,
                last_name=last.value,
            )
        )

    def full_name(self) -> str:
        """'First M. Last' или 'First Last'."""
        if self.middle_initial is None:
            return f"{self.first_name} {self.last_name}"
        return f"{self.first_name} {self.middle_initial}. {self.last_name}"
