import logging
from typing import List, Optional

from .enums import BatteryStatus
from .models import DeviceSnapshot

logger = logging.getLogger(__name__)

BLOCK_SEPARATOR = "Found"
AVAILABLE_MARKER = "Status: BATTERY_AVAILABLE"
CHARGING_MARKER = "Status: BATTERY_CHARGING"
LEVEL_LABEL = "Level: "


def _parseLevel(line: str) -> Optional[int]:
    text = line.strip().replace(LEVEL_LABEL, "").replace("%", "").strip()
    try:
        level = int(text)
    except ValueError:
        return None
    if not 0 <= level <= 100:
        return None
    return level


def _isNameLine(line: str) -> bool:
    return line.rstrip().endswith("!") and line[:1].isspace()


def parseDevice(block: str) -> Optional[DeviceSnapshot]:
    """
    Parse one per-device chunk of headsetcontrol output.

    Returns None when the chunk has no name line, reports a disconnected
    device without a level, or carries a level that is not a percentage.
    """
    name = ""
    batteryStatus = BatteryStatus.disconnected
    battery: Optional[int] = None

    for line in block.splitlines():
        if AVAILABLE_MARKER in line:
            batteryStatus = BatteryStatus.discharging
        elif CHARGING_MARKER in line:
            batteryStatus = BatteryStatus.charging
        elif _isNameLine(line):
            name = line.strip().rstrip("!")
        elif LEVEL_LABEL in line:
            battery = _parseLevel(line)
            if battery is None:
                logger.debug("Dropping device block with malformed level line %r", line)
                return None

    if not name or (batteryStatus is BatteryStatus.disconnected and battery is None):
        return None

    name = name.split("(", 1)[0].strip()
    if not name:
        return None

    return DeviceSnapshot(name=name, batteryStatus=batteryStatus, battery=battery)


def splitDeviceBlocks(text: str) -> List[str]:
    return [chunk for chunk in text.split(BLOCK_SEPARATOR) if chunk]


def parseStatusOutput(text: str) -> List[DeviceSnapshot]:
    snapshots: List[DeviceSnapshot] = []
    for block in splitDeviceBlocks(text):
        snapshot = parseDevice(block)
        if snapshot is not None:
            snapshots.append(snapshot)
    return snapshots
