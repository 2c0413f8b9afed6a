from django.http import JsonResponse
from django.db import connection, DatabaseError
from django.core.cache import caches
from django.utils.timezone import now

from django.contrib.admin.views.decorators import staff_member_required


def _cache_ok(alias):
    cache = caches[alias]
    cache.set("health_check", "ok", timeout=10)
    return cache.get("health_check") == "ok"


@staff_member_required
def health_check(request):
    status = {
        "status": "ok",
        "time": now().isoformat(),
        "db": "ok",
        "cache": "ok",
        "holiday_cache": "ok",
    }

    # --- DB check ---
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        status["status"] = "error"
        status["db"] = "error"
        status["error"] = str(e)
        return JsonResponse(status, status=500)

    # --- Cache checks ---
    for alias, key in (("default", "cache"), ("holidays", "holiday_cache")):
        if not _cache_ok(alias):
            status["status"] = "error"
            status[key] = "error"

    return JsonResponse(status, status=200 if status["status"] == "ok" else 500)
