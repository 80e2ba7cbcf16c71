from typing import Dict, Iterator, Optional

from .models import DeviceRecord


class DeviceRegistry:
    """
    Last known record per device name. Lives for the whole process,
    records are never removed. Not thread safe.
    """

    def __init__(self) -> None:
        self._records: Dict[str, DeviceRecord] = {}

    def lookup(self, name: str) -> Optional[DeviceRecord]:
        return self._records.get(name)

    def upsert(self, record: DeviceRecord) -> None:
        self._records[record.name] = record

    def __iter__(self) -> Iterator[DeviceRecord]:
        return iter(list(self._records.values()))

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records
