"""
Tests for the migration registry and runner
"""
import pytest
import sqlalchemy as sa
from alembic import op
from sqlalchemy import delete, func, select

from creativityhub.config import Settings, get_settings
from creativityhub.domain.currency import Currency
from creativityhub.domain.user_settings import UserSettingKey
from creativityhub.infrastructure.db.migrator import (
    MigrationRunner,
    MigrationStatus,
    MigrationUnitError,
    VersionSkewError,
)
from creativityhub.infrastructure.db.models import MigrationModel, UserSettingModel
from creativityhub.infrastructure.repositories.migrations import MigrationLedgerRepository
from creativityhub.infrastructure.repositories.user_settings import UserSettingsRepository
from creativityhub.migrations.registry import (
    MIGRATION_MODULES,
    MigrationRegistry,
    MigrationRegistryError,
    MigrationUnit,
    default_registry,
)


def _tables(session) -> set:
    return set(sa.inspect(session.connection()).get_table_names())


def _ledger_ids(session) -> list:
    return list(session.execute(select(MigrationModel.id).order_by(MigrationModel.id)).scalars())


def _unit(revision: int, calls: list, fail: bool = False) -> MigrationUnit:
    def upgrade():
        calls.append(revision)
        if fail:
            raise RuntimeError("boom")
        op.create_table(
            f"extra_{revision}",
            sa.Column("id", sa.Integer(), primary_key=True),
            if_not_exists=True,
        )

    return MigrationUnit(revision=revision, name=f"extra {revision}", upgrade=upgrade)


class TestMigrationRegistry:
    def test_default_registry_is_contiguous(self):
        registry = default_registry()
        assert registry.latest_version == len(MIGRATION_MODULES) == 6
        assert [u.revision for u in registry.units] == [1, 2, 3, 4, 5, 6]

    def test_unit_name_comes_from_module_docstring(self):
        unit = MigrationUnit.from_module(MIGRATION_MODULES[2])
        assert unit.name == "create documents table"

    def test_gap_is_rejected(self):
        with pytest.raises(MigrationRegistryError):
            MigrationRegistry([_unit(1, []), _unit(3, [])])

    def test_duplicate_is_rejected(self):
        with pytest.raises(MigrationRegistryError):
            MigrationRegistry([_unit(1, []), _unit(1, [])])

    def test_units_after(self):
        registry = default_registry()
        assert [u.revision for u in registry.units_after(4)] == [5, 6]
        assert registry.units_after(6) == ()


class TestMigrationRunner:
    def test_fresh_store_reaches_latest(self, raw_session):
        runner = MigrationRunner(raw_session)

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.MIGRATED
        assert (result.from_version, result.to_version) == (0, 6)
        assert result.ok
        assert runner.current_version() == 6
        assert _ledger_ids(raw_session) == [1, 2, 3, 4, 5, 6]
        assert {
            "migrations", "user_settings", "projects", "checklists", "checklist_items",
            "ideas", "tags", "idea_tags", "expense_categories", "expenses", "notes",
            "documents", "reminders", "work_logs", "activity_logs",
        } <= _tables(raw_session)

    def test_rerun_is_noop(self, raw_session):
        runner = MigrationRunner(raw_session)
        runner.migrate_to_latest()

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.UP_TO_DATE
        assert (result.from_version, result.to_version) == (6, 6)
        assert _ledger_ids(raw_session) == [1, 2, 3, 4, 5, 6]

    def test_five_units_on_fresh_store(self, raw_session):
        registry = MigrationRegistry.from_modules(MIGRATION_MODULES[:5])
        runner = MigrationRunner(raw_session, registry)

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.MIGRATED
        assert runner.current_version() == 5
        expected = Currency(get_settings().DEFAULT_CURRENCY)
        assert UserSettingsRepository(raw_session).fetch_currency() == expected
        assert "work_logs" in _tables(raw_session)
        assert "activity_logs" not in _tables(raw_session)

    def test_resumes_from_recorded_version(self, raw_session):
        MigrationRunner(raw_session, MigrationRegistry.from_modules(MIGRATION_MODULES[:3])).migrate_to_latest()

        result = MigrationRunner(raw_session).migrate_to_latest()

        assert (result.from_version, result.to_version) == (3, 6)
        assert _ledger_ids(raw_session) == [1, 2, 3, 4, 5, 6]

    def test_ledger_ahead_of_registry_is_version_skew(self, raw_session):
        ledger = MigrationLedgerRepository(raw_session)
        ledger.create_table_if_not_exists()
        for version in (1, 2, 3):
            ledger.add_version(version)
        calls = []
        runner = MigrationRunner(raw_session, MigrationRegistry([_unit(1, calls), _unit(2, calls)]))

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.VERSION_SKEW
        assert calls == []
        assert isinstance(result.error, VersionSkewError)
        assert result.error.stored_version == 3
        assert result.error.latest_version == 2
        assert _ledger_ids(raw_session) == [1, 2, 3]
        with pytest.raises(VersionSkewError):
            result.raise_for_status()

    def test_failing_unit_stops_the_run(self, raw_session):
        calls = []
        registry = MigrationRegistry([_unit(1, calls), _unit(2, calls, fail=True), _unit(3, calls)])
        runner = MigrationRunner(raw_session, registry)

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.UNIT_FAILED
        assert result.failed_revision == 2
        assert result.to_version == 1
        assert calls == [1, 2]
        assert isinstance(result.error, MigrationUnitError)
        assert isinstance(result.error.cause, RuntimeError)
        assert runner.current_version() == 1
        with pytest.raises(MigrationUnitError):
            result.raise_for_status()

    def test_failed_run_resumes_after_fix(self, raw_session):
        calls = []
        MigrationRunner(
            raw_session, MigrationRegistry([_unit(1, calls), _unit(2, calls, fail=True)])
        ).migrate_to_latest()

        result = MigrationRunner(
            raw_session, MigrationRegistry([_unit(1, calls), _unit(2, calls)])
        ).migrate_to_latest()

        assert result.status == MigrationStatus.MIGRATED
        assert (result.from_version, result.to_version) == (1, 2)
        assert calls == [1, 2, 2]
        assert "extra_2" in _tables(raw_session)

    def test_current_version_of_empty_store_is_zero(self, raw_session):
        assert MigrationRunner(raw_session).current_version() == 0


class TestBootstrapUnit:
    """Unit 1: ledger, user_settings and the default currency seed"""

    @staticmethod
    def _runner(session, currency: str) -> MigrationRunner:
        return MigrationRunner(
            session,
            MigrationRegistry.from_modules(MIGRATION_MODULES[:1]),
            settings=Settings(DEFAULT_CURRENCY=currency, _env_file=None),
        )

    @staticmethod
    def _currency_rows(session) -> int:
        stmt = (
            select(func.count())
            .select_from(UserSettingModel)
            .where(UserSettingModel.key == UserSettingKey.CURRENCY.value)
        )
        return session.execute(stmt).scalar()

    def test_seeds_currency_from_runner_settings(self, raw_session):
        result = self._runner(raw_session, "EUR").migrate_to_latest()

        assert result.status == MigrationStatus.MIGRATED
        assert UserSettingsRepository(raw_session).fetch_currency() == Currency.EUR

    def test_invalid_default_currency_fails_the_unit(self, raw_session):
        runner = self._runner(raw_session, "XXX")

        result = runner.migrate_to_latest()

        assert result.status == MigrationStatus.UNIT_FAILED
        assert result.failed_revision == 1
        assert result.to_version == 0
        assert isinstance(result.error.cause, ValueError)
        assert runner.current_version() == 0
        assert _ledger_ids(raw_session) == []

    def test_rerun_over_existing_settings_is_idempotent(self, raw_session):
        self._runner(raw_session, "GBP").migrate_to_latest()
        settings = UserSettingsRepository(raw_session)
        assert settings.upsert_value("marker", "kept")
        raw_session.execute(delete(MigrationModel))
        raw_session.commit()

        result = self._runner(raw_session, "EUR").migrate_to_latest()

        assert result.status == MigrationStatus.MIGRATED
        assert (result.from_version, result.to_version) == (0, 1)
        assert settings.fetch_currency() == Currency.EUR
        assert self._currency_rows(raw_session) == 1
        assert settings.fetch_value("marker") == "kept"
