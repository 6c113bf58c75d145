from ezsymlink.widgets.dialogs import ConfirmDialog, ErrorDialog, PathPickerScreen
from ezsymlink.widgets.link_form import LinkForm
from ezsymlink.widgets.recent_links import RecentLinksPanel

__all__ = [
    "ConfirmDialog",
    "ErrorDialog",
    "LinkForm",
    "PathPickerScreen",
    "RecentLinksPanel",
]
