"""
User settings repository (key/value table created by migration 1)
"""
import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from creativityhub.domain.currency import DEFAULT_CURRENCY, Currency
from creativityhub.domain.user_settings import AppColorScheme, AppLanguage, UserSettingKey
from creativityhub.infrastructure.db.models import UserSettingModel

logger = logging.getLogger(__name__)


class UserSettingsRepository:
    def __init__(self, db: Session):
        self.db = db

    def fetch_value(self, key: UserSettingKey | str) -> Optional[str]:
        key = getattr(key, "value", key)
        try:
            return self.db.execute(
                select(UserSettingModel.value).where(UserSettingModel.key == key)
            ).scalar()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to read user setting '%s'", key)
            return None

    def upsert_value(self, key: UserSettingKey | str, value: str) -> bool:
        key = getattr(key, "value", key)
        stmt = sqlite_insert(UserSettingModel).values(key=key, value=value)
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserSettingModel.key],
            set_={"value": stmt.excluded["value"]},
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to save user setting '%s'", key)
            return False
        return True

    def delete_value(self, key: UserSettingKey | str) -> bool:
        key = getattr(key, "value", key)
        try:
            row = self.db.execute(
                select(UserSettingModel).where(UserSettingModel.key == key)
            ).scalar_one_or_none()
            if row is not None:
                self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to delete user setting '%s'", key)
            return False
        return True

    # ------------------------------------------------------------------
    # Typed accessors
    # ------------------------------------------------------------------

    def fetch_currency(self) -> Currency:
        raw = self.fetch_value(UserSettingKey.CURRENCY)
        try:
            return Currency(raw) if raw else DEFAULT_CURRENCY
        except ValueError:
            return DEFAULT_CURRENCY

    def set_currency(self, currency: Currency) -> bool:
        return self.upsert_value(UserSettingKey.CURRENCY, currency.value)

    def fetch_language(self) -> Optional[AppLanguage]:
        raw = self.fetch_value(UserSettingKey.LANGUAGE)
        try:
            return AppLanguage(raw) if raw else None
        except ValueError:
            return None

    def set_language(self, language: AppLanguage) -> bool:
        return self.upsert_value(UserSettingKey.LANGUAGE, language.value)

    def fetch_color_scheme(self) -> AppColorScheme:
        raw = self.fetch_value(UserSettingKey.COLOR_SCHEME)
        try:
            return AppColorScheme(raw) if raw else AppColorScheme.SYSTEM
        except ValueError:
            return AppColorScheme.SYSTEM

    def set_color_scheme(self, scheme: AppColorScheme) -> bool:
        return self.upsert_value(UserSettingKey.COLOR_SCHEME, scheme.value)

    def fetch_or_generate_user_id(self) -> str:
        """Stable anonymous id for this install; generated on first call."""
        existing = self.fetch_value(UserSettingKey.USER_ID)
        if existing:
            return existing
        user_id = str(uuid.uuid4())
        if not self.upsert_value(UserSettingKey.USER_ID, user_id):
            logger.warning("Generated user id could not be persisted")
        return user_id
