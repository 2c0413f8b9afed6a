from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from django.conf import settings
from django.conf.urls.static import static

urlpatterns = [
    path("admin/", admin.site.urls),

    path("", include("core.urls")),

    # JSON console API
    path("api/", include("accounts.urls")),
    path("api/", include("courses.urls")),
    path("api/", include("students.urls")),
    path("api/", include("trainers.urls")),
    path("api/", include("equipment.urls")),
    path("api/", include("core.api_urls")),

    # Default redirect
    path("", RedirectView.as_view(url="/admin/", permanent=False)),
]

# media
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
