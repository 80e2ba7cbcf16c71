import logging
import subprocess
from typing import Protocol

from .enums import NotificationIcon

logger = logging.getLogger(__name__)

NOTIFICATION_ICONS = frozenset(icon.value for icon in NotificationIcon)


def resolveIcon(icon: str) -> str:
    if icon in NOTIFICATION_ICONS:
        return NotificationIcon(icon).value
    return NotificationIcon.information.value


class Notifier(Protocol):
    def notify(self, title: str, body: str, icon: str) -> bool:
        ...


class NotifySendNotifier:
    """
    Desktop notifications through notify-send. Fire and forget: a failed
    dispatch is logged and reported as False, never raised.
    """

    def __init__(self, executable: str = "notify-send", timeoutSeconds: float = 10.0) -> None:
        self.executable = executable
        self.timeoutSeconds = float(timeoutSeconds)

    def notify(self, title: str, body: str, icon: str) -> bool:
        command = [self.executable, f"--icon={resolveIcon(icon)}", "--", title, body]
        try:
            subprocess.run(command, stdout=subprocess.DEVNULL, timeout=self.timeoutSeconds, check=False)
        except (OSError, subprocess.SubprocessError) as error:
            logger.warning("Could not send notification %r: %s", body, error)
            return False
        return True
