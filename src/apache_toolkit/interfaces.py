"""Apache toolkit collaborator interfaces."""
from abc import ABCMeta
from abc import abstractmethod


class PackageInstaller(metaclass=ABCMeta):
    """Operating system package manager."""

    @abstractmethod
    def install(self, *packages: str) -> None:  # pragma: no cover
        """Install packages, all in a single transaction.

        :raises .errors.SubprocessError: if the package manager fails

        """
        raise NotImplementedError()

    @abstractmethod
    def uninstall(self, *packages: str) -> None:  # pragma: no cover
        """Remove packages.

        :raises .errors.SubprocessError: if the package manager fails

        """
        raise NotImplementedError()

    @abstractmethod
    def is_installed(self, package: str) -> bool:  # pragma: no cover
        """Is the package currently installed?"""
        raise NotImplementedError()


class ServiceController(metaclass=ABCMeta):
    """Operating system service manager."""

    @abstractmethod
    def start(self, name: str) -> None:  # pragma: no cover
        """Start the named service.

        :raises .errors.SubprocessError: if the service manager fails

        """
        raise NotImplementedError()

    @abstractmethod
    def stop(self, name: str) -> None:  # pragma: no cover
        """Stop the named service.

        :raises .errors.SubprocessError: if the service manager fails

        """
        raise NotImplementedError()

    @abstractmethod
    def reload(self, name: str) -> None:  # pragma: no cover
        """Ask the named service to reload its configuration.

        :raises .errors.SubprocessError: if the service manager fails

        """
        raise NotImplementedError()

    @abstractmethod
    def is_active(self, name: str) -> bool:  # pragma: no cover
        """Is the named service running?"""
        raise NotImplementedError()
