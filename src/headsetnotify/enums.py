from enum import Enum


class BatteryStatus(Enum):
    charging = "Charging"
    discharging = "Discharging"
    disconnected = "Disconnected"

    @property
    def isConnected(self) -> bool:
        return self is not BatteryStatus.disconnected


class NotificationIcon(str, Enum):
    information = "dialog-information"
    batteryCaution = "battery-caution"
    batteryLow = "battery-low"
    battery = "battery"
