import pytest

from infra_dialog.exceptions import InfraDialogError
from infra_dialog.surface import SystemSurface
from tests.device import test_dismiss_dialogs as device_run
from tests.mocks import MockDevice, MockNode, text_node


def fake_client(nodes, calls):
    class FakeClient:
        def __init__(self, serial, system_packages):
            calls["serial"] = serial
            self.d = MockDevice(nodes)
            self.packages = system_packages

        def system_surface(self):
            calls["device"] = self.d
            return SystemSurface(self.d, self.packages)

    return FakeClient


def test_device_run_is_marked_not_skipped():
    marks = device_run.pytestmark
    marks = marks if isinstance(marks, list) else [marks]
    assert [m.name for m in marks] == ["device"]


def test_unset_serial_uses_default_device(monkeypatch):
    calls = {}
    monkeypatch.delenv("DEVICE_SERIAL", raising=False)
    monkeypatch.setattr(device_run, "AndroidDeviceClient", fake_client([MockNode("OK")], calls))
    device_run.test_dismiss_dialogs()
    assert calls["serial"] is None
    assert calls["device"].taps == ["OK"]


def test_device_run_fails_on_infra_text(monkeypatch):
    calls = {}
    monkeypatch.setenv("DEVICE_SERIAL", "emulator-5554")
    monkeypatch.setattr(
        device_run, "AndroidDeviceClient", fake_client([text_node("Low Battery")], calls)
    )
    with pytest.raises(InfraDialogError):
        device_run.test_dismiss_dialogs()
    assert calls["serial"] == "emulator-5554"
