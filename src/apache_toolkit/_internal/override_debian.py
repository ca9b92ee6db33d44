""" Distribution specific override class for Debian family (Ubuntu/Debian) """
import logging
import os
from typing import Tuple

from apache_toolkit import util
from apache_toolkit._internal import configurator
from apache_toolkit._internal import constants
from apache_toolkit._internal.configurator import OsOptions

logger = logging.getLogger(__name__)


class DebianConfigurator(configurator.ApacheConfigurator):
    """Debian specific ApacheConfigurator override class"""

    FAMILY = constants.DistroFamily.UBUNTU

    OS_DEFAULTS = OsOptions(
        service_name="apache2",
        config_dir="/etc/apache2/sites-available",
        settings_dir="/etc/apache2/conf-enabled",
        log_dir="/var/log/apache2",
        base_packages=["apache2"],
        wsgi_packages=["libapache2-mod-wsgi-py3"],
        legacy_wsgi_packages=["libapache2-mod-wsgi"],
        mod_query_cmd=["a2query", "-m"],
        enmod="a2enmod",
        ensite="a2ensite",
        dissite="a2dissite",
        handle_modules=True,
        version_cmd=["apache2ctl", "-v"],
        conftest_cmd=["apache2ctl", "configtest"],
    )

    def install_apache_wsgi(self) -> None:
        """Install Apache and its WSGI module, then enable the module.

        The Python 2 and Python 3 WSGI modules conflict, the legacy one is
        purged before installing its replacement.

        """
        self._require_identity("apache wsgi installation")
        self.installer.install(*self.options.base_packages)
        if self.config.use_python3:
            for package in self.options.legacy_wsgi_packages:
                if self.installer.is_installed(package):
                    logger.info("Removing conflicting package %s", package)
                    self.installer.uninstall(package)
        self.installer.install(*self._wsgi_packages())
        self.enable_apache_mod(constants.WSGI_MOD)

    def _site_paths(self, site_name: str, action: str) -> Tuple[str, str]:
        return super()._site_paths(_strip_ext(site_name), action)

    def apache_site_config_for(self, site_name: str) -> str:
        """Path of the configuration file of a site.

        Sites live in sites-available whether they are enabled or not,
        a2ensite links them from sites-enabled.

        """
        enabled, _ = self._site_paths(site_name, "apache site lookup")
        return enabled

    def enable_apache_site(self, site_name: str) -> None:
        """Enables an available site with a2ensite, Apache reload required."""
        self._require_identity("apache site enablement")
        util.run_script([self.options.ensite, _strip_ext(site_name)])
        logger.info("Enabled site %s", site_name)

    def disable_apache_site(self, site_name: str) -> None:
        """Disables a site with a2dissite, Apache reload required."""
        self._require_identity("apache site disablement")
        util.run_script([self.options.dissite, _strip_ext(site_name)])
        logger.info("Disabled site %s", site_name)

    def remove_site_config(self, site_name: str) -> None:
        """Disable the site, then delete its configuration."""
        path = self.apache_site_config_for(site_name)
        if not os.path.isfile(path):
            logger.debug("No configuration to remove for site %s", site_name)
            return
        self.disable_apache_site(site_name)
        os.remove(path)
        logger.info("Removed site configuration %s", path)


def _strip_ext(site_name: str) -> str:
    if site_name.endswith(constants.SITE_EXT):
        return site_name[:-len(constants.SITE_EXT)]
    return site_name
