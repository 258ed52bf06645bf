"""
Column types shared by the ORM models.

Amounts are stored as text so SQLite never rounds them through REAL, and
enum columns tolerate values written by a newer build of the app.
"""
from decimal import Decimal, InvalidOperation
from enum import Enum

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator


class DecimalString(TypeDecorator):
    """Decimal <-> TEXT; unparsable stored values read back as None."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return Decimal(value)
        except (InvalidOperation, ValueError):
            return None


class EnumString(TypeDecorator):
    """
    Str-valued Enum <-> VARCHAR.

    Unknown stored values map to ``default`` (or None when no default is
    given) instead of failing the whole row.
    """

    impl = String(32)
    cache_ok = True

    def __init__(self, enum_cls: type[Enum], default: Enum | None = None):
        super().__init__()
        self.enum_cls = enum_cls
        self.default = default

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value.value
        return self.enum_cls(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        try:
            return self.enum_cls(value)
        except ValueError:
            return self.default
