from django.urls import path

from notifications.views import cron

app_name = "notifications"

urlpatterns = [
    path("cron/", cron, name="cron"),
]
