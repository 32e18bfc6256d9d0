from django.contrib import admin
from django.urls import path, re_path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView

from apps.core.views import not_found

urlpatterns = [
    path("admin/", admin.site.urls),

    # your APIs
    path("api/", include("apps.core.urls")),
    path("api/", include("apps.surveys.urls")),
    path("api/", include("apps.responses.urls")),
    path("api/", include("apps.analytics.urls")),

    # OpenAPI schema and docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # anything else under /api/ is a JSON 404, even with DEBUG on
    re_path(r"^api/", not_found),
]

handler404 = "apps.core.views.not_found"
