"""Detect and dismiss transient system dialogs on a lab device.

A sweep checks the system UI for text that means the device itself is in a
bad state (low battery, unsupported cable) and fails right away if it finds
any. Otherwise it taps the usual dismiss buttons. Closing one dialog can
reveal another, so the sweep runs a fixed number of rounds.
"""

import logging
from typing import Protocol

from .exceptions import InfraDialogError

# Low battery or a bad cable is reported as an infra failure.
FAILURE_TEXTS = ("Low Battery", "This accessory may not be supported")
BUTTON_TEXTS = ("OK", "Later", "Allow", "Remind Me Later", "Close")
SWEEP_ROUNDS = 3

logger = logging.getLogger(__name__)


class Surface(Protocol):
    def count_texts_containing(self, phrase: str) -> int: ...

    def tap_if_present(self, label: str) -> bool: ...


def check_failure_texts(surface: Surface) -> None:
    """Raise :class:`InfraDialogError` for the first failure phrase on screen."""
    for phrase in FAILURE_TEXTS:
        count = surface.count_texts_containing(phrase)
        if count:
            logger.error("Infra dialog detected: %r (%d match(es))", phrase, count)
            raise InfraDialogError(phrase, count)


def dismiss_dialogs(surface: Surface) -> list[str]:
    """Tap every known dismiss button present and return the tapped labels."""
    return [label for label in BUTTON_TEXTS if surface.tap_if_present(label)]


def sweep(surface: Surface) -> None:
    """Run the fixed dismissal rounds, raising :class:`InfraDialogError` on a failure phrase."""
    for round_no in range(SWEEP_ROUNDS):
        logger.debug("Dialog sweep round %d/%d", round_no + 1, SWEEP_ROUNDS)
        check_failure_texts(surface)
        tapped = dismiss_dialogs(surface)
        if tapped:
            logger.info("Round %d dismissed: %s", round_no + 1, ", ".join(tapped))
    logger.info("Dialog sweep finished cleanly")
