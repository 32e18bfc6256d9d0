from django.contrib import admin
from .models import SurveyResponse, PlatformSelection


class PlatformSelectionInline(admin.TabularInline):
    model = PlatformSelection
    extra = 0
    fields = ["position", "platform_name", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(SurveyResponse)
class SurveyResponseAdmin(admin.ModelAdmin):
    list_display = ["id", "survey", "created_at"]
    list_filter = ["survey"]
    inlines = [PlatformSelectionInline]
