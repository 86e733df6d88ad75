from django.contrib import admin

from applications.models import Application


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ["id", "event", "user", "gender", "status", "applied_at"]
    list_filter = ["status", "gender", "event"]
    search_fields = ["user__email"]
    readonly_fields = ["form_snapshot", "applied_at", "updated_at"]
