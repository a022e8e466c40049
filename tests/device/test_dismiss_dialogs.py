"""On-device sweep run by the lab harness: ``pytest -m device -x``.

Deselected by default. ``DEVICE_SERIAL`` picks the device, otherwise the
single attached device is used.
"""

import os

import pytest

from infra_dialog.config import settings
from infra_dialog.device_client import AndroidDeviceClient
from infra_dialog.sweeper import sweep

pytestmark = pytest.mark.device


def test_dismiss_dialogs():
    # Dismiss system dialogs, e.g. No SIM card, and fail on low battery or a bad cable.
    client = AndroidDeviceClient(
        os.environ.get("DEVICE_SERIAL") or None,
        system_packages=settings.packages,
    )
    sweep(client.system_surface())
