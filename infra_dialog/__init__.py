from .exceptions import DialogSweeperError, DeviceConnectionError, InfraDialogError
from .surface import SYSTEM_PACKAGES, SystemSurface
from .device_client import AndroidDeviceClient
from .sweeper import BUTTON_TEXTS, FAILURE_TEXTS, SWEEP_ROUNDS, sweep
from .logging_config import configure_logging

__all__ = [
    "DialogSweeperError",
    "DeviceConnectionError",
    "InfraDialogError",
    "SystemSurface",
    "SYSTEM_PACKAGES",
    "AndroidDeviceClient",
    "BUTTON_TEXTS",
    "FAILURE_TEXTS",
    "SWEEP_ROUNDS",
    "sweep",
    "configure_logging",
]
