"""
Core domain models, validated values and contracts.

Не зависит от внешних систем (UI, хранилища и т.д.).
"""
