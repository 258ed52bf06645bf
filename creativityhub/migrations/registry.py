"""
Migration registry - the ordered list of schema-change units.

Order of MIGRATION_MODULES = order of execution. A new unit gets the next
revision number and is appended at the end; released units are never
renumbered or removed.
"""
from dataclasses import dataclass
from types import ModuleType
from typing import Callable, Iterable, List

from creativityhub.migrations.versions import (
    m0001_bootstrap_user_settings,
    m0002_initial_schema,
    m0003_create_documents_table,
    m0004_create_reminders_table,
    m0005_create_work_logs_table,
    m0006_create_activity_logs_table,
)

MIGRATION_MODULES: List[ModuleType] = [
    m0001_bootstrap_user_settings,
    m0002_initial_schema,
    m0003_create_documents_table,
    m0004_create_reminders_table,
    m0005_create_work_logs_table,
    m0006_create_activity_logs_table,
]


class MigrationRegistryError(ValueError):
    pass


@dataclass(frozen=True)
class MigrationUnit:
    revision: int
    name: str
    upgrade: Callable[[], None]

    @classmethod
    def from_module(cls, module: ModuleType) -> "MigrationUnit":
        doc = (module.__doc__ or module.__name__).strip()
        return cls(
            revision=module.revision,
            name=doc.splitlines()[0],
            upgrade=module.upgrade,
        )


class MigrationRegistry:
    """
    Validated, immutable sequence of units numbered 1..N without gaps
    """

    def __init__(self, units: Iterable[MigrationUnit]):
        self._units = tuple(units)
        for expected, unit in enumerate(self._units, start=1):
            if unit.revision != expected:
                raise MigrationRegistryError(
                    f"Migration '{unit.name}' has revision {unit.revision}, expected {expected}"
                )

    @classmethod
    def from_modules(cls, modules: Iterable[ModuleType]) -> "MigrationRegistry":
        return cls(MigrationUnit.from_module(m) for m in modules)

    @property
    def latest_version(self) -> int:
        return len(self._units)

    @property
    def units(self) -> tuple[MigrationUnit, ...]:
        return self._units

    def units_after(self, version: int) -> tuple[MigrationUnit, ...]:
        """Units still to apply when the ledger is at ``version``."""
        return self._units[max(version, 0):]

    def __len__(self) -> int:
        return len(self._units)


def default_registry() -> MigrationRegistry:
    return MigrationRegistry.from_modules(MIGRATION_MODULES)
