import logging
from typing import Iterable

from .exceptions import DeviceConnectionError
from .surface import SYSTEM_PACKAGES, SystemSurface

logger = logging.getLogger(__name__)


class AndroidDeviceClient:
    """Wrapper around uiautomator2 exposing the system dialog surface."""

    def __init__(self, serial: str | None = None, system_packages: Iterable[str] = SYSTEM_PACKAGES) -> None:
        import uiautomator2 as u2

        self.serial = serial or None
        self.system_packages = tuple(system_packages)
        name = self.serial or "<default>"
        logger.info("Connecting to device %s", name, extra={"device": name})
        try:
            self.d = u2.connect(self.serial)
        except Exception as e:
            raise DeviceConnectionError(
                f"Failed to connect to device {name}: {e}"
            ) from e
        for fn in ("screen_on", "unlock"):
            try:
                getattr(self.d, fn)()
            except Exception as e:
                logger.warning("Failed to %s: %s", fn, e)

    def system_surface(self, packages: Iterable[str] | None = None) -> SystemSurface:
        return SystemSurface(self.d, packages or self.system_packages)
