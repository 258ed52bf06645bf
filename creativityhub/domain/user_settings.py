"""Keys and value enums stored in the user_settings key/value table"""
from enum import Enum


class UserSettingKey(str, Enum):
    CURRENCY = "currency"
    LANGUAGE = "language"
    COLOR_SCHEME = "color_scheme"
    USER_ID = "user_id"
    ACTIVITY_LOG_CLEANUP_LAST_RUN_AT = "activity_log_cleanup_last_run_at"
    ACTIVITY_LOG_CLEANUP_LAST_REMOVED_COUNT = "activity_log_cleanup_last_removed_count"


class AppLanguage(str, Enum):
    EN = "en"
    RU = "ru"
    KK = "kk"


class AppColorScheme(str, Enum):
    SYSTEM = "system"
    LIGHT = "light"
    DARK = "dark"
