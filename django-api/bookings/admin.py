from django.contrib import admin

from bookings.models import StoredRecord


@admin.register(StoredRecord)
class StoredRecordAdmin(admin.ModelAdmin):
    list_display = ["key", "updated_at"]
    search_fields = ["key"]
    readonly_fields = ["updated_at"]
