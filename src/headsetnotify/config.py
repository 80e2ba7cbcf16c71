from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Config:
    pollingIntervalMs: int = 5000
    debug: bool = True
    batteryThreshold: int = 10
    suppressionGate: bool = True
    reconnectDelaySeconds: float = 1.0
    statusCommand: Tuple[str, ...] = ("headsetcontrol", "-b")
    notifyCommand: str = "notify-send"
    commandTimeoutSeconds: float = 10.0

    @property
    def pollingIntervalSeconds(self) -> float:
        return self.pollingIntervalMs / 1000.0

    def validate(self) -> "Config":
        if self.pollingIntervalMs <= 0:
            raise ValueError("pollingIntervalMs must be > 0")
        if not 0 <= self.batteryThreshold <= 100:
            raise ValueError("batteryThreshold must be between 0 and 100")
        if self.reconnectDelaySeconds < 0:
            raise ValueError("reconnectDelaySeconds must be >= 0")
        return self
