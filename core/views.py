from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_GET


@require_GET
def version(request):
    return HttpResponse(settings.API_VERSION, content_type="text/plain")


@require_GET
def health_check(request):
    return JsonResponse({"status": "ok", "service": settings.SERVICE_NAME})
