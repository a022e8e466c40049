import argparse
import logging

from .config import settings
from .device_client import AndroidDeviceClient
from .exceptions import DeviceConnectionError, InfraDialogError
from .logging_config import configure_logging
from .sweeper import sweep

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INFRA_FAILURE = 1
EXIT_NO_DEVICE = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Dismiss transient system dialogs and fail on infra warnings"
    )
    parser.add_argument(
        "-d",
        "--device",
        type=str,
        default=settings.device_serial,
        help="Android device serial or host:port (default: first attached device)",
    )
    parser.add_argument(
        "-p",
        "--package",
        dest="packages",
        action="append",
        help="Package owning system dialogs, repeatable (default: SYSTEM_PACKAGES)",
    )
    args = parser.parse_args(argv)
    if not args.packages:
        args.packages = settings.packages
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(
        level=settings.log_level,
        device=args.device or None,
        fmt=settings.log_format,
        log_file=settings.log_file,
        json_format=settings.log_json,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
    )

    try:
        client = AndroidDeviceClient(args.device, system_packages=args.packages)
    except DeviceConnectionError as e:
        logger.error("%s", e)
        return EXIT_NO_DEVICE

    try:
        sweep(client.system_surface())
    except InfraDialogError as e:
        logger.error("Infra failure: %s", e)
        return EXIT_INFRA_FAILURE
    return EXIT_OK
