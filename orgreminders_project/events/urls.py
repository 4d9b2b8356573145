from django.urls import path

from events.views import event_detail, event_list, event_save

app_name = "events"

urlpatterns = [
    path("", event_list, name="list"),
    path("save/", event_save, name="save"),
    path("<int:key>/", event_detail, name="detail"),
]
