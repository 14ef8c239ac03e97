from bindable.lib.bindable_object import BindableObject
from bindable.lib.current_receiver import get_receiver
from bindable.lib.event_config import EventConfig
from bindable.lib.events import Binding, EventBinder
from bindable.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Binding.__name__,
    BindableObject.__name__,
    EventBinder.__name__,
    EventConfig.__name__,
    get_receiver.__name__,
]
