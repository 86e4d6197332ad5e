"""Navigation list model for a file manager's side panel."""

from sidenav.models import NavigationListModel, NavigationSection
from sidenav.settings import NavigationSettings, load_settings

__all__ = [
    "NavigationListModel",
    "NavigationSection",
    "NavigationSettings",
    "load_settings",
]
