import logging
import re
from typing import Any, Iterable

logger = logging.getLogger(__name__)

TEXT_CLASS = "android.widget.TextView"
BUTTON_CLASS = "android.widget.Button"

SYSTEMUI_PACKAGE = "com.android.systemui"
# Processes that own system dialogs: status/battery alerts, runtime
# permission prompts, install prompts and SIM/STK warnings.
SYSTEM_PACKAGES = (
    SYSTEMUI_PACKAGE,
    "com.google.android.permissioncontroller",
    "com.android.permissioncontroller",
    "com.google.android.packageinstaller",
    "com.android.packageinstaller",
    "com.android.phone",
    "com.android.stk",
)


def contains_pattern(phrase: str) -> str:
    """Build a case-insensitive ``textMatches`` regex for a substring.

    uiautomator matches the whole label, so the phrase is wrapped in ``.*``.
    """
    return f"(?is).*{re.escape(phrase)}.*"


def packages_pattern(packages: Iterable[str]) -> str:
    """Build a ``packageNameMatches`` regex accepting any of ``packages``."""
    return "(?:" + "|".join(re.escape(p) for p in packages) + ")"


class SystemSurface:
    """System dialog tree of a uiautomator2 device, limited to ``packages``."""

    def __init__(self, device: Any, packages: Iterable[str] = SYSTEM_PACKAGES) -> None:
        self.d = device
        self.packages = tuple(packages)
        if not self.packages:
            raise ValueError("SystemSurface needs at least one package")
        self._package_re = packages_pattern(self.packages)

    def count_texts_containing(self, phrase: str) -> int:
        query = self.d(
            packageNameMatches=self._package_re,
            className=TEXT_CLASS,
            textMatches=contains_pattern(phrase),
        )
        return query.count

    def button(self, label: str) -> Any:
        return self.d(packageNameMatches=self._package_re, className=BUTTON_CLASS, text=label)

    def tap_if_present(self, label: str) -> bool:
        btn = self.button(label)
        if not btn.exists():
            return False
        logger.info("Dismissing system dialog: tapping %r", label)
        btn.click()
        return True
