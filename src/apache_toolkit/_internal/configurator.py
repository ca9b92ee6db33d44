"""Apache Configurator."""
import copy
import glob
import logging
import os
import re
import time
from typing import Any
from typing import Dict
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Tuple

from apache_toolkit import configuration
from apache_toolkit import errors
from apache_toolkit import interfaces
from apache_toolkit import util
from apache_toolkit._internal import constants
from apache_toolkit._internal import packages
from apache_toolkit._internal import service

logger = logging.getLogger(__name__)

TEMPLATE_TOKEN = re.compile(r"%([A-Z][A-Z0-9_]*)%")


class ApacheIdentity(NamedTuple):
    """Service name and directories of the Apache installation."""
    service_name: str
    config_dir: str
    settings_dir: str
    log_dir: str


class OsOptions:
    """
    Dedicated class to describe the OS specificities (eg. paths, binary names)
    that the Apache configurator needs to be aware to operate properly.
    """
    def __init__(self,
                 service_name: Optional[str] = None,
                 config_dir: Optional[str] = None,
                 settings_dir: Optional[str] = None,
                 log_dir: Optional[str] = None,
                 base_packages: Optional[List[str]] = None,
                 wsgi_packages: Optional[List[str]] = None,
                 legacy_wsgi_packages: Optional[List[str]] = None,
                 default_site_globs: Optional[List[str]] = None,
                 mod_query_cmd: Optional[List[str]] = None,
                 enmod: Optional[str] = None,
                 ensite: Optional[str] = None,
                 dissite: Optional[str] = None,
                 handle_modules: bool = False,
                 version_cmd: Optional[List[str]] = None,
                 conftest_cmd: Optional[List[str]] = None,
                 ):
        self.service_name = service_name
        self.config_dir = config_dir
        self.settings_dir = settings_dir
        self.log_dir = log_dir
        self.base_packages = base_packages or []
        self.wsgi_packages = wsgi_packages or []
        self.legacy_wsgi_packages = legacy_wsgi_packages or []
        self.default_site_globs = default_site_globs or []
        self.mod_query_cmd = mod_query_cmd
        self.enmod = enmod
        self.ensite = ensite
        self.dissite = dissite
        self.handle_modules = handle_modules
        self.version_cmd = version_cmd
        self.conftest_cmd = conftest_cmd


class ApacheConfigurator:
    """Apache configurator.

    The generic configurator stands for a distribution we do not know how
    to manage: every operation needing a distribution specific value
    raises :class:`~apache_toolkit.errors.UnsupportedDistroError`. The
    distribution specific override classes replace ``OS_DEFAULTS`` and,
    where the conventions differ, the methods below.

    Sites are enabled and disabled by renaming ``{site}.conf`` to and from
    ``{site}.conf.disabled`` in the configuration directory, which is how
    Apache is laid out on Fedora and SUSE.

    :ivar config: Configuration.
    :type config: :class:`~apache_toolkit.configuration.NamespaceConfig`

    :ivar identity: Resolved service name and directories, `None` if the
        distribution defaults and the configuration overrides together do
        not name all of them.
    :type identity: :class:`ApacheIdentity`

    """

    FAMILY = constants.DistroFamily.UNSUPPORTED

    OS_DEFAULTS = OsOptions()

    def __init__(self, config: configuration.NamespaceConfig,
                 installer: Optional[interfaces.PackageInstaller] = None,
                 service_controller: Optional[interfaces.ServiceController] = None,
                 distro_id: str = "") -> None:
        """Initialize an Apache Configurator.

        :param installer: package manager, picked from the distribution
            family when not given
        :param service_controller: service manager, systemd when not given
        :param str distro_id: distribution identifier, for error messages

        """
        self.config = config
        self.distro_id = distro_id
        self.options = copy.deepcopy(self.OS_DEFAULTS)
        self._installer = installer
        self.service_controller = service_controller or service.SystemdServiceController()
        self.identity = self._resolve_identity()

    def option(self, key: str) -> Any:
        """Get a value from options, the configuration overrides taking
        precedence over the distribution defaults."""
        override = getattr(self.config, "apache_" + key, None)
        if override is not None:
            return override
        return getattr(self.options, key)

    def _resolve_identity(self) -> Optional[ApacheIdentity]:
        values: Dict[str, str] = {}
        for field in ApacheIdentity._fields:
            value = self.option(field)
            if value is None:
                return None
            values[field] = value
        identity = ApacheIdentity(**values)
        logger.debug("Apache identity for %s: %s", self.FAMILY.value, identity)
        return identity

    def resolved_identity(self) -> ApacheIdentity:
        """Service name and directories of Apache.

        :raises .errors.UnsupportedDistroError: if they are not all known

        """
        return self._require_identity("apache configuration")

    def _require_identity(self, action: str) -> ApacheIdentity:
        if self.FAMILY is constants.DistroFamily.UNSUPPORTED or self.identity is None:
            raise errors.UnsupportedDistroError(action, self.distro_id)
        return self.identity

    def _service_name(self, action: str) -> str:
        service_name = self.option("service_name")
        if not service_name:
            raise errors.UnsupportedDistroError(action, self.distro_id)
        return service_name

    @property
    def installer(self) -> interfaces.PackageInstaller:
        """Package manager of the distribution family."""
        if self._installer is None:
            self._installer = packages.get_installer(self.FAMILY, self.distro_id)
        return self._installer

    ####################################################################
    # Installation
    ####################################################################

    def install_apache_wsgi(self) -> None:
        """Install Apache and its WSGI module, then enable the module.

        :raises .errors.UnsupportedDistroError: on unknown distributions
        :raises .errors.SubprocessError: if the package manager fails

        """
        self._require_identity("apache wsgi installation")
        self.remove_default_sites()
        self.installer.install(*(self.options.base_packages + self._wsgi_packages()))
        self.enable_apache_mod(constants.WSGI_MOD)

    def _wsgi_packages(self) -> List[str]:
        if self.config.use_python3:
            return self.options.wsgi_packages
        return self.options.legacy_wsgi_packages

    def remove_default_sites(self) -> None:
        """Delete the site fragments shipped by the distribution package."""
        identity = self._require_identity("apache default site removal")
        for pattern in self.options.default_site_globs:
            for path in glob.glob(os.path.join(identity.config_dir, pattern)):
                logger.info("Removing default site configuration %s", path)
                os.remove(path)

    ####################################################################
    # Modules
    ####################################################################

    def is_mod_enabled(self, mod_name: str) -> bool:
        """Is the Apache module enabled?

        Modules are always enabled where the distribution does not let us
        manage them: installing the package enables the module.

        """
        self._require_identity("apache module query")
        if not self.options.handle_modules:
            return True
        return util.probe_script(self.options.mod_query_cmd + [mod_name])

    def enable_apache_mod(self, mod_name: str) -> None:
        """Enables module in Apache.

        Apache is restarted when the module was not already enabled.

        :param str mod_name: Name of the module to enable. (e.g. 'wsgi')

        :raises .errors.UnsupportedDistroError: on unknown distributions
        :raises .errors.SubprocessError: if a2enmod or the restart fails

        """
        self._require_identity("apache module enablement")
        if not self.options.handle_modules:
            logger.debug("Apache module %s is enabled by its package", mod_name)
            return
        if self.is_mod_enabled(mod_name):
            logger.debug("Apache module %s is already enabled", mod_name)
            return

        util.run_script([self.options.enmod, mod_name])
        logger.info("Enabled Apache %s module", mod_name)
        self.restart()

    ####################################################################
    # Sites
    ####################################################################

    def _site_paths(self, site_name: str, action: str) -> Tuple[str, str]:
        identity = self._require_identity(action)
        enabled = os.path.join(identity.config_dir, site_name + constants.SITE_EXT)
        return enabled, enabled + constants.DISABLED_SUFFIX

    def apache_site_config_for(self, site_name: str) -> str:
        """Path of the configuration file of a site.

        The path reflects the current enablement state of the site: the
        ``.disabled`` variant is returned unless the enabled file exists.
        Do not keep the result around across enable or disable calls.

        :param str site_name: Name of the site

        :returns: absolute path of the site configuration file
        :rtype: str

        """
        enabled, disabled = self._site_paths(site_name, "apache site lookup")
        if os.path.isfile(enabled):
            return enabled
        return disabled

    def enable_apache_site(self, site_name: str) -> None:
        """Enables an available site, Apache reload required.

        Does nothing if the site is already enabled or has no configuration
        file at all.

        :param str site_name: Name of the site

        """
        enabled, disabled = self._site_paths(site_name, "apache site enablement")
        if os.path.isfile(disabled) and not os.path.isfile(enabled):
            os.rename(disabled, enabled)
            logger.info("Enabled site %s", site_name)
        else:
            logger.debug("Nothing to enable for site %s", site_name)

    def disable_apache_site(self, site_name: str) -> None:
        """Disables a site, Apache reload required.

        Does nothing if the site is not enabled.

        :param str site_name: Name of the site

        """
        enabled, disabled = self._site_paths(site_name, "apache site disablement")
        if os.path.isfile(enabled):
            os.rename(enabled, disabled)
            logger.info("Disabled site %s", site_name)
        else:
            logger.debug("Nothing to disable for site %s", site_name)

    def write_site_config(self, site_name: str, template: str,
                          substitutions: Optional[Dict[str, str]] = None) -> str:
        """Render a site configuration template and write it in place.

        ``%KEY%`` tokens are replaced from ``substitutions``; ``%USER%`` and
        ``%GROUP%`` default to the configured Apache user and group. Tokens
        without a value are left as is. The file is written where
        :meth:`apache_site_config_for` points, so the site keeps its
        enablement state.

        :param str site_name: Name of the site
        :param str template: Configuration template
        :param dict substitutions: Token values

        :returns: path of the written file
        :rtype: str

        """
        path = self.apache_site_config_for(site_name)
        values = {"USER": self.config.apache_user, "GROUP": self.config.apache_group}
        values.update(substitutions or {})
        content = TEMPLATE_TOKEN.sub(
            lambda match: values.get(match.group(1), match.group(0)), template)

        temp_path = path + ".new"
        # A stale file from an interrupted write is discarded
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        with open(temp_path, "w") as site_file:
            site_file.write(content)
        os.replace(temp_path, path)
        logger.info("Wrote configuration of site %s to %s", site_name, path)
        return path

    def remove_site_config(self, site_name: str) -> None:
        """Delete the configuration of a site, enabled or not.

        :param str site_name: Name of the site

        """
        for path in self._site_paths(site_name, "apache site removal"):
            if os.path.isfile(path):
                os.remove(path)
                logger.info("Removed site configuration %s", path)

    ####################################################################
    # Service
    ####################################################################

    def start(self) -> None:
        """Start the Apache service."""
        self.service_controller.start(self._service_name("apache start"))

    def stop(self) -> None:
        """Stop the Apache service.

        :raises .errors.UnsupportedDistroError: if the service name is not
            known

        """
        self.service_controller.stop(self._service_name("apache stop"))

    def restart(self) -> None:
        """Stop Apache, wait for its ports to be released, start it again."""
        self.stop()
        time.sleep(constants.RESTART_GRACE_SECONDS)
        self.start()

    def reload(self) -> None:
        """Reload the Apache configuration."""
        self.service_controller.reload(self._service_name("apache reload"))

    def is_running(self) -> bool:
        """Is the Apache service active?"""
        return self.service_controller.is_active(self._service_name("apache status"))

    def config_test(self) -> None:
        """Check the configuration of Apache for errors.

        :raises .errors.MisconfigurationError: If config_test fails

        """
        self._require_identity("apache configuration test")
        try:
            util.run_script(self.options.conftest_cmd)
        except errors.SubprocessError as err:
            raise errors.MisconfigurationError(str(err))

    def get_version(self) -> Tuple[int, ...]:
        """Return version of Apache Server.

        Version is returned as tuple. (ie. 2.4.7 = (2, 4, 7))

        :returns: version
        :rtype: tuple

        :raises .MisconfigurationError: if unable to find Apache version

        """
        self._require_identity("apache version query")
        try:
            stdout, _ = util.run_script(self.options.version_cmd)
        except errors.SubprocessError:
            raise errors.MisconfigurationError(
                "Unable to run %s" % " ".join(self.options.version_cmd))

        regex = re.compile(r"Apache/([0-9\.]*)", re.IGNORECASE)
        matches = regex.findall(stdout)

        if len(matches) != 1:
            raise errors.MisconfigurationError("Unable to find Apache version")

        return tuple(int(i) for i in matches[0].split(".") if i)
