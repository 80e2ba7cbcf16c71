import logging
import time
from typing import Callable, Iterable, Optional

from .config import Config
from .engine import NotificationEngine
from .models import NotificationIntent
from .notifier import Notifier
from .parser import parseStatusOutput
from .registry import DeviceRegistry
from .source import StatusSource, StatusSourceError

logger = logging.getLogger(__name__)


class Poller:
    """
    Single threaded poll loop: fetch, parse, decide, notify, remember, sleep.
    """

    def __init__(
        self,
        config: Config,
        source: StatusSource,
        notifier: Notifier,
        registry: Optional[DeviceRegistry] = None,
        engine: Optional[NotificationEngine] = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config
        self.source = source
        self.notifier = notifier
        self.registry = registry if registry is not None else DeviceRegistry()
        self.engine = engine if engine is not None else NotificationEngine(
            batteryThreshold=config.batteryThreshold,
            reconnectDelaySeconds=config.reconnectDelaySeconds,
            suppressionGate=config.suppressionGate,
        )
        self.sleep = sleep
        self.clock = clock

    def _execute(self, intents: Iterable[NotificationIntent]) -> int:
        dispatched = 0
        for intent in intents:
            self.notifier.notify(intent.title, intent.body, intent.icon)
            dispatched += 1
            if intent.delayAfterSeconds > 0:
                self.sleep(intent.delayAfterSeconds)
        return dispatched

    def _dumpRegistry(self) -> None:
        for record in self.registry:
            logger.info("%s", record)

    def pollOnce(self) -> int:
        """
        Run one poll cycle. Returns how many notifications were dispatched.
        """
        try:
            rawStatus = self.source.fetchStatus()
        except StatusSourceError as error:
            logger.error("Skipping poll cycle: %s", error)
            return 0

        dispatched = 0
        for snapshot in parseStatusOutput(rawStatus):
            decision = self.engine.decide(self.registry.lookup(snapshot.name), snapshot)
            dispatched += self._execute(decision.intents)

            if decision.record is not None:
                self.registry.upsert(decision.record)
            else:
                logger.debug("Suppressed cycle for %s", snapshot.name)

        if self.config.debug:
            self._dumpRegistry()

        return dispatched

    def run(self, count: int = 0) -> None:
        intervalSeconds = self.config.pollingIntervalSeconds
        cycles = 0

        while True:
            startedAt = self.clock()
            self.pollOnce()
            cycles += 1

            if count and cycles >= count:
                return

            elapsed = self.clock() - startedAt
            self.sleep(max(0.0, intervalSeconds - elapsed))
