from .config import Config
from .engine import NotificationEngine
from .enums import BatteryStatus, NotificationIcon
from .models import Decision, DeviceRecord, DeviceSnapshot, NotificationIntent
from .notifier import NotifySendNotifier
from .parser import parseDevice, parseStatusOutput
from .poller import Poller
from .registry import DeviceRegistry
from .source import HeadsetControlSource, StatusSourceError

__all__ = [
    "Config",
    "NotificationEngine",
    "BatteryStatus",
    "NotificationIcon",
    "Decision",
    "DeviceRecord",
    "DeviceSnapshot",
    "NotificationIntent",
    "NotifySendNotifier",
    "parseDevice",
    "parseStatusOutput",
    "Poller",
    "DeviceRegistry",
    "HeadsetControlSource",
    "StatusSourceError",
]
