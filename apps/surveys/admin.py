from django.contrib import admin
from .models import Survey


@admin.register(Survey)
class SurveyAdmin(admin.ModelAdmin):
    list_display = ["title", "is_active", "is_visible", "created_at", "updated_at"]
    list_filter = ["is_active", "is_visible"]
    search_fields = ["title"]
