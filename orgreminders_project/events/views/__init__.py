from .event_views import event_detail, event_list, event_save

__all__ = ["event_detail", "event_list", "event_save"]
