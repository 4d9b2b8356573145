from django.contrib import admin

from .models import Event


# ---------------------------------------------------------------------
# EVENT ADMIN
# ---------------------------------------------------------------------
@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = (
        "title",
        "due",
        "org_names",
        "reminder_list",
        "email_enabled",
        "text_enabled",
        "submitter",
    )
    list_filter = ("email_enabled", "text_enabled", "due")
    search_fields = ("title", "submitter")
    ordering = ("due",)
    readonly_fields = ("created", "saved")

    fieldsets = (
        ("Event", {
            "fields": ("title", "orgs", "due", "submitter"),
        }),
        ("Channels", {
            "fields": ("email_enabled", "text_enabled"),
        }),
        ("Content", {
            "fields": ("email_message", "text_message"),
        }),
        ("Reminders", {
            "fields": ("reminders",),
        }),
        ("Timestamps", {
            "fields": ("created", "saved"),
        }),
    )

    @admin.display(description="Organizations")
    def org_names(self, obj):
        return ", ".join(obj.orgs)

    @admin.display(description="Reminders")
    def reminder_list(self, obj):
        return ", ".join(obj.reminders)
