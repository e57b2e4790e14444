"""Common table contract.

Column names shared by tables that follow the row-list conventions, plus
the locale table and view definitions.
"""

from __future__ import annotations

# The default value for a row id, if the row has none.
NO_ID = -1

# The unique row id column.
COLUMN_ID = "_id"


class GlobalTable:
    """Tables whose rows are synced with a server."""

    # Type: INTEGER
    COLUMN_GLOBAL_ID = "_id_global"


class LocaleTable:
    """Tables holding rows in several localizations."""

    # Type: TEXT
    COLUMN_LOCALE = "locale"


class LocationTable:
    """Tables with a WGS84 location, e.g. ``50.083698,45.407367``."""

    # Type: TEXT
    COLUMN_LOCATION = "location"


class MapTable:
    """Tables with direct links to map services."""

    COLUMN_MAP_GOOGLE = "google"
    COLUMN_MAP_MAPSME = "mapsme"
    COLUMN_MAP_MAPYCZ = "mapycz"
    COLUMN_MAP_YANDEX = "yandex"


class WebTable:
    COLUMN_WEB = "web"


class WikiTable:
    COLUMN_WIKI = "wiki"


class SkuTable:
    """Tables with a stock keeping unit."""

    COLUMN_SKU = "sku"


class TableLocale:
    """The table of supported locales."""

    TABLE_NAME = "locale"

    # Language and country/region code, e.g. ``ru_RU`` or ``en_US``.
    COLUMN_CODE = "code"
    # The locale name in its own language.
    COLUMN_NAME = "name"
    # Whether the locale is available to the user. Type: BOOLEAN, default 1.
    COLUMN_ENABLED = "enabled"

    SQL_CREATE = (
        f"CREATE TABLE {TABLE_NAME} ("
        f"{COLUMN_CODE} TEXT PRIMARY KEY ASC UNIQUE NOT NULL, "
        f"{COLUMN_NAME} TEXT NOT NULL, "
        f"{COLUMN_ENABLED} BOOLEAN DEFAULT (1) );"
    )


class ViewLocale(TableLocale):
    """The view of locales enabled for the user."""

    VIEW_NAME = "view_locale"

    SQL_CREATE = (
        f"CREATE VIEW {VIEW_NAME} AS SELECT * FROM {TableLocale.TABLE_NAME} "
        f"WHERE {TableLocale.TABLE_NAME}.{TableLocale.COLUMN_ENABLED} = 1;"
    )
