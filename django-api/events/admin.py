from django.contrib import admin

from events.models import Event, TimePart


class TimePartInline(admin.TabularInline):
    model = TimePart
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = [
        "title",
        "starts_at",
        "capacity_male",
        "capacity_female",
        "application_deadline",
    ]
    search_fields = ["title", "location"]
    date_hierarchy = "starts_at"
    inlines = [TimePartInline]
