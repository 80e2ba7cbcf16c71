import argparse
import logging
from importlib.metadata import version as packageVersion
from typing import List, Optional

from .config import Config
from .notifier import NotifySendNotifier
from .poller import Poller
from .source import HeadsetControlSource

#*Helpers
def _printDeviceList(vendorId: Optional[int]) -> int:
    import hid

    devices = [d for d in hid.enumerate() if vendorId is None or d.get("vendor_id") == vendorId]

    if not devices:
        if vendorId is None:
            print("No HID devices found")
        else:
            print(f"No HID devices found for vendor_id=0x{vendorId:04X}")
        return 1

    seen = set()
    for device in devices:
        key = (device.get("vendor_id"), device.get("product_id"), device.get("product_string"))
        if key in seen:
            continue
        seen.add(key)
        print(
            f"[{len(seen)}] "
            f"vendor=0x{int(device.get('vendor_id') or 0):04X} "
            f"product=0x{int(device.get('product_id') or 0):04X} "
            f"mfg={device.get('manufacturer_string')!r} "
            f"product={device.get('product_string')!r}"
        )

    return 0


def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="headsetnotify", description="Desktop notifications for headset battery and connection changes, via headsetcontrol")

    #?Meta
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--device-list", action="store_true", help="List attached HID devices and exit")
    parser.add_argument("--vendor-id", type=lambda s: int(s, 0), default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    #?Polling
    parser.add_argument("--interval", type=int, default=Config.pollingIntervalMs, help="Polling interval in milliseconds")
    parser.add_argument("--threshold", type=int, default=Config.batteryThreshold, help="Low battery percentage")
    parser.add_argument("--debug", action=argparse.BooleanOptionalAction, default=Config.debug, help="Log every known device after each poll")
    parser.add_argument("--no-suppression-gate", action="store_true", help="Keep notifying for devices that already sent a battery notification")
    parser.add_argument("--headsetcontrol", default=Config.statusCommand[0], help="Path to the headsetcontrol executable")

    #?Run length
    parser.add_argument("--once", action="store_true")
    parser.add_argument("--count", type=int, default=0)

    return parser


def buildConfig(args: argparse.Namespace) -> Config:
    config = Config(
        pollingIntervalMs=args.interval,
        debug=args.debug,
        batteryThreshold=args.threshold,
        suppressionGate=not args.no_suppression_gate,
        statusCommand=(args.headsetcontrol,) + Config.statusCommand[1:],
    )
    try:
        return config.validate()
    except ValueError as error:
        raise SystemExit(str(error)) from error


def main(argv: Optional[List[str]] = None) -> int:
    args = buildParser().parse_args(argv)

    #?version
    if args.version:
        print(packageVersion("headsetnotify"))
        return 0

    if args.device_list:
        return _printDeviceList(args.vendor_id)

    if args.count < 0:
        raise SystemExit("--count must be >= 0")

    config = buildConfig(args)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    poller = Poller(
        config,
        source=HeadsetControlSource(config.statusCommand, timeoutSeconds=config.commandTimeoutSeconds),
        notifier=NotifySendNotifier(config.notifyCommand, timeoutSeconds=config.commandTimeoutSeconds),
    )

    logging.getLogger(__name__).info("Starting headset battery notifier (every %d ms)", config.pollingIntervalMs)

    try:
        poller.run(count=1 if args.once else args.count)
    except KeyboardInterrupt:
        print("\nStopped.")
    return 0
