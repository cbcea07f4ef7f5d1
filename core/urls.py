from django.contrib import admin
from django.urls import include, path

from core.views import health_check, version

urlpatterns = [
    path("admin/", admin.site.urls),
    path("version", version, name="version"),
    path("healthz", health_check, name="healthz"),
    path("v1/api/", include("accounts.urls")),
    path("v1/api/", include("funds.urls")),
]
