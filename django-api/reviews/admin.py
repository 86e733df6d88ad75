from django.contrib import admin

from reviews.models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ["id", "event", "user", "rating", "created_at"]
    list_filter = ["rating", "event"]
    search_fields = ["content", "user__email"]
    readonly_fields = ["created_at", "updated_at"]
