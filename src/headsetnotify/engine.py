from typing import List, Optional

from .enums import BatteryStatus, NotificationIcon
from .models import Decision, DeviceRecord, DeviceSnapshot, NotificationIntent

NOTIFICATION_STEP = 5
FULL_LEVEL = 100


class NotificationEngine:
    """
    Decides which notifications a new snapshot deserves given the device's
    previous record, and what the record becomes afterwards.

    decide() does no I/O and never sleeps: the pause between the "connected"
    and "battery level" notifications is carried on the "connected" intent as
    delayAfterSeconds so the caller can honour it.
    """

    def __init__(self, batteryThreshold: int = 10, reconnectDelaySeconds: float = 1.0, suppressionGate: bool = True) -> None:
        self.batteryThreshold = int(batteryThreshold)
        self.reconnectDelaySeconds = float(reconnectDelaySeconds)
        self.suppressionGate = bool(suppressionGate)

    def decide(self, old: Optional[DeviceRecord], snapshot: DeviceSnapshot) -> Decision:
        if old is None:
            return self._decideNewDevice(snapshot)

        #?A fresh snapshot never remembers a level, so this only passes for devices that have not notified yet
        if self.suppressionGate and old.lastNotifBatteryLevel is not None:
            return Decision()

        intents: List[NotificationIntent] = []
        level = old.lastNotifBatteryLevel

        level = self._connectionTransition(old, snapshot, intents, level)
        level = self._batteryTransition(old, snapshot, intents, level)

        return Decision(intents=tuple(intents), record=DeviceRecord.fromSnapshot(snapshot, level))

    #*Case helpers
    def _decideNewDevice(self, snapshot: DeviceSnapshot) -> Decision:
        intents: List[NotificationIntent] = []
        level = self._announceConnection(snapshot, intents)
        return Decision(intents=tuple(intents), record=DeviceRecord.fromSnapshot(snapshot, level))

    def _announceConnection(self, snapshot: DeviceSnapshot, intents: List[NotificationIntent]) -> Optional[int]:
        intents.append(
            NotificationIntent(
                snapshot.name,
                "New device connected",
                NotificationIcon.battery.value,
                delayAfterSeconds=self.reconnectDelaySeconds,
            )
        )

        if snapshot.battery is None:
            return None

        intents.append(NotificationIntent(snapshot.name, f"Battery level: {snapshot.battery}%", NotificationIcon.battery.value))
        return snapshot.battery

    def _connectionTransition(self, old: DeviceRecord, snapshot: DeviceSnapshot, intents: List[NotificationIntent], level: Optional[int]) -> Optional[int]:
        wasConnected = old.batteryStatus.isConnected
        isConnected = snapshot.batteryStatus.isConnected

        if wasConnected and not isConnected:
            intents.append(NotificationIntent(snapshot.name, "Device disconnected", NotificationIcon.batteryCaution.value))
            return None

        if not wasConnected and isConnected:
            announced = self._announceConnection(snapshot, intents)
            return level if announced is None else announced

        return level

    def _batteryTransition(self, old: DeviceRecord, snapshot: DeviceSnapshot, intents: List[NotificationIntent], level: Optional[int]) -> Optional[int]:
        if old.battery is None or snapshot.battery is None:
            return level

        battery = snapshot.battery
        title = snapshot.name

        if snapshot.batteryStatus is BatteryStatus.discharging and battery < old.battery:
            if battery < self.batteryThreshold:
                intents.append(NotificationIntent(title, f"Battery level low: {battery}%", NotificationIcon.batteryLow.value))
                return battery
            if battery % NOTIFICATION_STEP == 0:
                intents.append(NotificationIntent(title, f"Battery level: {battery}%", NotificationIcon.battery.value))
                return battery

        elif snapshot.batteryStatus is BatteryStatus.charging and battery > old.battery:
            if battery == FULL_LEVEL:
                intents.append(NotificationIntent(title, f"Battery level full: {battery}%", NotificationIcon.battery.value))
                return battery
            if battery % NOTIFICATION_STEP == 0:
                intents.append(NotificationIntent(title, f"Charging {battery}%", NotificationIcon.battery.value))
                return battery

        return level
