from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import BatteryStatus


@dataclass(frozen=True)
class DeviceSnapshot:
    name: str
    batteryStatus: BatteryStatus
    battery: Optional[int] = None


@dataclass(frozen=True)
class DeviceRecord:
    name: str
    batteryStatus: BatteryStatus
    battery: Optional[int] = None
    lastNotifBatteryLevel: Optional[int] = None

    @classmethod
    def fromSnapshot(cls, snapshot: DeviceSnapshot, lastNotifBatteryLevel: Optional[int] = None) -> "DeviceRecord":
        return cls(name=snapshot.name, batteryStatus=snapshot.batteryStatus, battery=snapshot.battery, lastNotifBatteryLevel=lastNotifBatteryLevel)

    def __str__(self) -> str:
        return (
            f"Device: {self.name} "
            f"| Battery Status: {self.batteryStatus.value} "
            f"| Battery: {self.battery} "
            f"| Last Notif Battery Level: {self.lastNotifBatteryLevel}"
        )


@dataclass(frozen=True)
class NotificationIntent:
    title: str
    body: str
    icon: str
    delayAfterSeconds: float = 0.0


@dataclass(frozen=True)
class Decision:
    """
    Outcome of one device's poll cycle.
    record is None when the registry must be left untouched.
    """
    intents: Tuple[NotificationIntent, ...] = ()
    record: Optional[DeviceRecord] = None
