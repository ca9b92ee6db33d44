"""Apache toolkit errors."""


class Error(Exception):
    """Generic apache-toolkit error."""


class SubprocessError(Error):
    """Subprocess handling error."""


class UnsupportedDistroError(Error):
    """The host distribution has no Apache layout we know how to manage.

    :ivar str action: What was being attempted when the error was raised.

    """
    def __init__(self, action: str, distro_id: str = "") -> None:
        self.action = action
        self.distro_id = distro_id
        super().__init__(action, distro_id)

    def __str__(self) -> str:
        if self.distro_id:
            return (f"Distribution '{self.distro_id}' is not supported "
                    f"for {self.action}")
        return f"Distribution not supported for {self.action}"


class MisconfigurationError(Error):
    """Apache configuration is not usable."""


class ConfigurationError(Error):
    """Configuration sanity error."""
