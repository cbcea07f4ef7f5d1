import logging

from django.conf import settings
from django.db.utils import OperationalError

log = logging.getLogger(__name__)


def apply_sqlite_pragmas(sender, connection, **kwargs):
    """
    Apply settings.SQLITE_PRAGMAS to every new SQLite connection.

    busy_timeout makes concurrent order writers wait on the database lock
    instead of failing straight away.
    """
    if connection.vendor != "sqlite":
        return

    pragmas = getattr(settings, "SQLITE_PRAGMAS", None) or {}

    with connection.cursor() as cursor:
        for name, value in pragmas.items():
            try:
                cursor.execute(f"PRAGMA {name}={value};")
            except OperationalError as e:
                # journal_mode is persistent and fails while another process
                # holds the file; the other pragmas are per-connection.
                if name == "journal_mode" and "database is locked" in str(e).lower():
                    log.warning("SQLite is locked while setting journal_mode; continuing: %s", e)
                    continue
                raise
