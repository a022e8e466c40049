import json
import logging
import sys
from logging.handlers import RotatingFileHandler

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(device)s] %(name)s: %(message)s"
NO_DEVICE = "-"


class DeviceFilter(logging.Filter):
    """Stamp records with the serial of the device being swept.

    Records logged with an explicit ``extra={"device": ...}`` keep their value.
    """

    def __init__(self, device: str = NO_DEVICE) -> None:
        super().__init__()
        self.device = device

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "device", None):
            record.device = self.device
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per record, device included."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            "level": record.levelname,
            "device": getattr(record, "device", None) or NO_DEVICE,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(
    *,
    level: str | int = logging.INFO,
    device: str | None = None,
    fmt: str | None = None,
    log_file: str | None = None,
    json_format: bool = False,
    max_bytes: int = 0,
    backup_count: int = 0,
) -> None:
    """Attach stdout (and optionally file) handlers to the root logger.

    Every handler carries a :class:`DeviceFilter`, so ``%(device)s`` is usable
    in ``fmt``. ``max_bytes=0`` writes ``log_file`` without rotating it.
    Nothing happens when the root logger already has handlers.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count))

    device_filter = DeviceFilter(device or NO_DEVICE)
    root.setLevel(level)
    for h in handlers:
        h.setFormatter(formatter)
        h.addFilter(device_filter)
        root.addHandler(h)
