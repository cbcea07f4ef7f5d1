"""
Django settings for the fund back-office service.

Configuration classes are selected with DJANGO_CONFIGURATION
(Development, Test, Production); values come from DJANGO_* env vars.
"""

from pathlib import Path

from configurations import Configuration, values

BASE_DIR = Path(__file__).resolve().parent.parent


class Base(Configuration):
    BASE_DIR = BASE_DIR

    SECRET_KEY = values.SecretValue()
    DEBUG = values.BooleanValue(False)
    ALLOWED_HOSTS = values.ListValue(["localhost", "127.0.0.1"])

    SERVICE_NAME = "fund-backoffice"
    API_VERSION = "v1"

    INSTALLED_APPS = [
        "django.contrib.admin",
        "django.contrib.auth",
        "django.contrib.contenttypes",
        "django.contrib.sessions",
        "django.contrib.messages",
        "django.contrib.staticfiles",
        "rest_framework",
        "core.apps.CoreConfig",
        "funds",
        "valuations",
        "accounts",
    ]

    MIDDLEWARE = [
        "django.middleware.security.SecurityMiddleware",
        "core.middleware.RequestLogMiddleware",
        "django.contrib.sessions.middleware.SessionMiddleware",
        "django.middleware.common.CommonMiddleware",
        "django.middleware.csrf.CsrfViewMiddleware",
        "django.contrib.auth.middleware.AuthenticationMiddleware",
        "django.contrib.messages.middleware.MessageMiddleware",
        "django.middleware.clickjacking.XFrameOptionsMiddleware",
    ]

    ROOT_URLCONF = "core.urls"
    WSGI_APPLICATION = "core.wsgi.application"

    TEMPLATES = [
        {
            "BACKEND": "django.template.backends.django.DjangoTemplates",
            "DIRS": [],
            "APP_DIRS": True,
            "OPTIONS": {
                "context_processors": [
                    "django.template.context_processors.debug",
                    "django.template.context_processors.request",
                    "django.contrib.auth.context_processors.auth",
                    "django.contrib.messages.context_processors.messages",
                ]
            },
        }
    ]

    # -----------------------------
    # Database (SQLite)
    # -----------------------------
    SQLITE_PATH = values.Value(str(BASE_DIR / "backoffice.db"))
    SQLITE_PRAGMAS = values.DictValue(
        {
            "busy_timeout": "30000",
            "synchronous": "NORMAL",
            "foreign_keys": "ON",
            "journal_mode": "WAL",
        }
    )

    @property
    def DATABASES(self):
        return {
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": self.SQLITE_PATH,
            }
        }

    DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

    LANGUAGE_CODE = "en-us"
    TIME_ZONE = values.Value("UTC")
    USE_I18N = True
    USE_TZ = True

    STATIC_URL = "/static/"
    STATIC_ROOT = BASE_DIR / "staticfiles"

    # -----------------------------
    # REST framework
    # -----------------------------
    REST_FRAMEWORK = {
        "DEFAULT_AUTHENTICATION_CLASSES": [
            "rest_framework.authentication.BasicAuthentication",
            "rest_framework.authentication.SessionAuthentication",
        ],
        "DEFAULT_PERMISSION_CLASSES": [
            "rest_framework.permissions.IsAuthenticated",
        ],
        "DEFAULT_RENDERER_CLASSES": [
            "rest_framework.renderers.JSONRenderer",
        ],
        "EXCEPTION_HANDLER": "core.exceptions.api_exception_handler",
    }

    # -----------------------------
    # Back-office rules
    # -----------------------------
    # Reject orders when no NAV was published for today instead of
    # pricing them at the caller's quoted NAV.
    BACKOFFICE_REQUIRE_NAV_TODAY = values.BooleanValue(False)
    BACKOFFICE_ADMIN_ROLE = "ADMIN"
    BACKOFFICE_USER_ROLE = "USER"

    # -----------------------------
    # Logging
    # -----------------------------
    LOG_LEVEL = values.Value("INFO")

    @property
    def LOGGING(self):
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "request_id": {"()": "core.middleware.RequestIdFilter"},
            },
            "formatters": {
                "standard": {
                    "format": "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "filters": ["request_id"],
                    "formatter": "standard",
                },
            },
            "root": {"handlers": ["console"], "level": self.LOG_LEVEL},
            "loggers": {
                "django.db.backends": {"level": "WARNING"},
            },
        }

    # -----------------------------
    # Celery
    # -----------------------------
    CELERY_BROKER_URL = values.Value("redis://localhost:6379/0")
    CELERY_RESULT_BACKEND = values.Value("redis://localhost:6379/0")
    CELERY_TASK_DEFAULT_QUEUE = "backoffice"
    CELERY_TASK_ACKS_LATE = True
    CELERY_TASK_TIME_LIMIT = values.IntegerValue(60)
    CELERY_BROKER_CONNECTION_RETRY_ON_STARTUP = True

    # -----------------------------
    # Sentry
    # -----------------------------
    SENTRY_ENABLED = values.BooleanValue(False)
    SENTRY_URL = values.Value("")
    SENTRY_ENVIRONMENT = values.Value("development")
    SENTRY_TRACES_SAMPLE_RATE = values.FloatValue(0.0)


class Development(Base):
    DEBUG = values.BooleanValue(True)
    SECRET_KEY = values.Value("dev-insecure-key")
    ENV = "development"


class Test(Base):
    SECRET_KEY = "test-insecure-key"
    ENV = "test"
    LOG_LEVEL = "WARNING"

    SQLITE_PRAGMAS = {"foreign_keys": "ON"}

    @property
    def DATABASES(self):
        return {
            "default": {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": ":memory:",
            }
        }

    PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

    CELERY_TASK_ALWAYS_EAGER = True
    CELERY_TASK_EAGER_PROPAGATES = True
    CELERY_BROKER_URL = "memory://"
    CELERY_RESULT_BACKEND = "cache+memory://"


class Production(Base):
    ENV = "production"
    SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
    SQLITE_PATH = values.Value("/data/backoffice.db")
    SENTRY_ENVIRONMENT = values.Value("production")
