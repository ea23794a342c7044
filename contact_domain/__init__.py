"""
contact-domain — контакты из валидированных значений и tagged unions.

- core/domain: ограниченные примитивы, ContactMethod, Contact
- core/contracts: JSON Schema записи контакта и загрузчик
- reporting: потребители с исчерпывающим разбором вариантов
"""

__version__ = "0.1.0"
