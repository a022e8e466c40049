class DialogSweeperError(Exception):
    """Base exception for operational errors around the dialog sweep."""


class DeviceConnectionError(DialogSweeperError):
    """Raised when an ADB device cannot be reached."""


class InfraDialogError(AssertionError):
    """Raised when the system UI shows text pointing at a lab/hardware problem."""

    def __init__(self, phrase: str, count: int) -> None:
        self.phrase = phrase
        self.count = count
        super().__init__(
            f"Found {count} system text element(s) containing {phrase!r}"
        )
