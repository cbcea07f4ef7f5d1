from django.apps import AppConfig
from django.db.backends.signals import connection_created

from .db_pragmas import apply_sqlite_pragmas


class CoreConfig(AppConfig):
    name = "core"
    verbose_name = "Back-office core"

    def ready(self):
        connection_created.connect(apply_sqlite_pragmas)
