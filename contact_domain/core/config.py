"""
ValidationConfig — Параметры валидации ограниченных примитивов

Frozen dataclass с дефолтами. Передаётся в smart constructors через
аргумент config=; если не передан, используется DEFAULT_VALIDATION_CONFIG.
"""

from dataclasses import dataclass, field, replace
from typing import Final, Iterable


# 50 штатов + округ Колумбия
US_STATE_CODES: Final[frozenset[str]] = frozenset(
    {
        "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "FL", "GA",
        "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD",
        "MA", "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ",
        "NM", "NY", "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC",
        "SD", "TN", "TX", "UT", "VT", "VA", "WA", "WV", "WI", "WY",
        "DC",
    }
)


@dataclass(frozen=True)
class ValidationConfig:
    """
    Конфигурация правил валидации.

    - email_pattern: непустая локальная часть, '@', домен с точкой
    - zip_pattern: ровно 5 цифр
    - phone_pattern: допустимые символы телефона (цифры, '+', разделители)
    - phone_min_digits / phone_max_digits: границы количества цифр
    - max_string_length: предел для String50
    - state_codes: разрешённые коды штатов (в верхнем регистре)
    """

    email_pattern: str = r"^\S+@\S+\.\S+$"
    zip_pattern: str = r"^\d{5}$"
    phone_pattern: str = r"^\+?[0-9 ().\-]+$"
    phone_min_digits: int = 7
    phone_max_digits: int = 15
    max_string_length: int = 50
    state_codes: frozenset[str] = field(default=US_STATE_CODES)

    def __post_init__(self):
        if self.phone_min_digits <= 0 or self.phone_min_digits > self.phone_max_digits:
            raise ValueError(
                f"phone_min_digits {self.phone_min_digits} must be in "
                f"[1, phone_max_digits={self.phone_max_digits}]"
            )
        if self.max_string_length <= 0:
            raise ValueError(f"max_string_length {self.max_string_length} must be > 0")
        if not self.state_codes:
            raise ValueError("state_codes must not be empty")

    def with_state_codes(self, codes: Iterable[str]) -> "ValidationConfig":
        """Копия конфигурации с другим набором штатов (коды приводятся к upper)."""
        return replace(self, state_codes=frozenset(c.strip().upper() for c in codes))


DEFAULT_VALIDATION_CONFIG: Final[ValidationConfig] = ValidationConfig()
