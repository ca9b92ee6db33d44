""" Distribution specific override class for Fedora 29+ and the RHEL family """
from apache_toolkit._internal import configurator
from apache_toolkit._internal import constants
from apache_toolkit._internal.configurator import OsOptions


class FedoraConfigurator(configurator.ApacheConfigurator):
    """Fedora 29+ specific ApacheConfigurator override class

    Modules ship enabled with their packages, so module enablement is left
    to the package manager.

    """

    FAMILY = constants.DistroFamily.FEDORA

    OS_DEFAULTS = OsOptions(
        service_name="httpd",
        config_dir="/etc/httpd/conf.d",
        settings_dir="/etc/httpd/conf.d",
        log_dir="/var/log/httpd",
        base_packages=["httpd"],
        wsgi_packages=["python3-mod_wsgi"],
        legacy_wsgi_packages=["mod_wsgi"],
        default_site_globs=["000-*"],
        handle_modules=False,
        version_cmd=["httpd", "-v"],
        conftest_cmd=["apachectl", "configtest"],
    )
