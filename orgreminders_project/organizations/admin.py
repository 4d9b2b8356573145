from django.contrib import admin

from .models import Member, Organization


# ---------------------------------------------------------------------
# ORGANIZATION ADMIN
# ---------------------------------------------------------------------
@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "time_zone",
        "active",
        "expires",
        "created",
    )
    list_filter = ("active", "time_zone")
    search_fields = ("name", "description")
    ordering = ("name",)
    readonly_fields = ("created", "saved")


# ---------------------------------------------------------------------
# MEMBER ADMIN
# ---------------------------------------------------------------------
@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "email",
        "text_addr",
        "email_on",
        "text_on",
        "web_user",
    )
    list_filter = ("email_on", "text_on", "web_user", "carrier", "organizations")
    search_fields = ("name", "email", "cell")
    ordering = ("name",)
    filter_horizontal = ("organizations",)
    readonly_fields = ("text_addr",)
