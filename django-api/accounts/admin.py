from django.contrib import admin

from accounts.models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = ["name", "email", "gender", "birth_year", "is_admin", "created_at"]
    list_filter = ["gender", "is_admin"]
    search_fields = ["name", "email", "phone"]
    readonly_fields = ["email", "created_at", "updated_at"]
