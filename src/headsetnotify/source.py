import logging
import subprocess
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)


class StatusSourceError(RuntimeError):
    pass


class StatusSource(Protocol):
    def fetchStatus(self) -> str:
        ...


class HeadsetControlSource:
    """
    Runs headsetcontrol and hands back its battery report as text.
    """

    def __init__(self, command: Sequence[str] = ("headsetcontrol", "-b"), timeoutSeconds: float = 10.0) -> None:
        self.command = tuple(str(part) for part in command)
        self.timeoutSeconds = float(timeoutSeconds)

    def fetchStatus(self) -> str:
        try:
            completed = subprocess.run(self.command, capture_output=True, timeout=self.timeoutSeconds, check=False)
        except subprocess.TimeoutExpired as error:
            raise StatusSourceError(f"{self.command[0]} did not finish within {self.timeoutSeconds:g}s") from error
        except OSError as error:
            raise StatusSourceError(f"Could not run {self.command[0]}: {error}") from error

        if completed.returncode != 0:
            #*headsetcontrol exits non-zero when no headset answers, stdout is still usable
            logger.debug("%s exited with code %d", self.command[0], completed.returncode)

        return completed.stdout.decode("utf-8", errors="replace")
