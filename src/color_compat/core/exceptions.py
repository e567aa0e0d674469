"""Generation exceptions."""


class ColorCompatError(Exception):
    """Base class for color-compat errors."""


class ColorResolutionFailed(ColorCompatError):
    """Raised when a catalog color cannot be resolved under an appearance."""

    def __init__(self, entry_name: str, appearance=None):
        self.entry_name = entry_name
        self.appearance = appearance
        message = f"Could not resolve color '{entry_name}'"
        if appearance is not None:
            message += f" for {appearance.value} appearance"
        super().__init__(message)
