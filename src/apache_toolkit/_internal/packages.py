"""Package manager wrappers."""
import logging
from typing import Dict
from typing import List
from typing import Type

from apache_toolkit import errors
from apache_toolkit import interfaces
from apache_toolkit import util
from apache_toolkit._internal import constants

logger = logging.getLogger(__name__)


class CommandInstaller(interfaces.PackageInstaller):
    """Package manager driven through its command line tools.

    Subclasses name the commands; package names are appended to them.

    """

    INSTALL_CMD: List[str] = []
    UNINSTALL_CMD: List[str] = []
    QUERY_CMD: List[str] = []

    def install(self, *packages: str) -> None:
        if not packages:
            return
        logger.info("Installing packages: %s", " ".join(packages))
        util.run_script(self.INSTALL_CMD + list(packages))

    def uninstall(self, *packages: str) -> None:
        if not packages:
            return
        logger.info("Removing packages: %s", " ".join(packages))
        util.run_script(self.UNINSTALL_CMD + list(packages))

    def is_installed(self, package: str) -> bool:
        return util.probe_script(self.QUERY_CMD + [package])


class AptInstaller(CommandInstaller):
    """apt for the Debian family."""

    INSTALL_CMD = ["apt-get", "--option", "Dpkg::Options::=--force-confold",
                   "--assume-yes", "install"]
    UNINSTALL_CMD = ["apt-get", "--assume-yes", "purge"]
    QUERY_CMD = ["dpkg", "-s"]


class DnfInstaller(CommandInstaller):
    """dnf for the Fedora family."""

    INSTALL_CMD = ["dnf", "install", "-y"]
    UNINSTALL_CMD = ["dnf", "remove", "-y"]
    QUERY_CMD = ["rpm", "--quiet", "-q"]


class ZypperInstaller(CommandInstaller):
    """zypper for SUSE."""

    INSTALL_CMD = ["zypper", "--non-interactive", "install", "--auto-agree-with-licenses"]
    UNINSTALL_CMD = ["zypper", "--non-interactive", "remove"]
    QUERY_CMD = ["rpm", "--quiet", "-q"]


INSTALLER_CLASSES: Dict[constants.DistroFamily, Type[CommandInstaller]] = {
    constants.DistroFamily.UBUNTU: AptInstaller,
    constants.DistroFamily.FEDORA: DnfInstaller,
    constants.DistroFamily.SUSE: ZypperInstaller,
}


def get_installer(family: constants.DistroFamily,
                  distro_id: str = "") -> interfaces.PackageInstaller:
    """Get the package manager of a distribution family.

    :raises .errors.UnsupportedDistroError: if the family has none

    """
    try:
        return INSTALLER_CLASSES[family]()
    except KeyError:
        raise errors.UnsupportedDistroError("package installation", distro_id)
