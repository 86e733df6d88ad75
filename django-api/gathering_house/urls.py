from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("rest_framework.urls")),
    path("api/", include("accounts.urls")),
    path("api/", include("events.urls")),
    path("api/", include("applications.urls")),
    path("api/", include("reviews.urls")),
    path("api/", include("reporting.urls")),
]

urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
