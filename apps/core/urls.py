from django.urls import path
from .views import HealthView, PlatformListView

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("platforms", PlatformListView.as_view(), name="platform-list"),
]
