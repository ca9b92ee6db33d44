""" Distribution specific override class for OpenSUSE """
from apache_toolkit._internal import configurator
from apache_toolkit._internal import constants
from apache_toolkit._internal.configurator import OsOptions


class OpenSUSEConfigurator(configurator.ApacheConfigurator):
    """OpenSUSE specific ApacheConfigurator override class"""

    FAMILY = constants.DistroFamily.SUSE

    OS_DEFAULTS = OsOptions(
        service_name="apache2",
        config_dir="/etc/apache2/vhosts.d",
        settings_dir="/etc/apache2/conf.d",
        log_dir="/var/log/apache2",
        base_packages=["apache2"],
        wsgi_packages=["apache2-mod_wsgi-python3"],
        legacy_wsgi_packages=["apache2-mod_wsgi"],
        mod_query_cmd=["a2enmod", "-q"],
        enmod="a2enmod",
        handle_modules=True,
        version_cmd=["apachectl", "-v"],
        conftest_cmd=["apachectl", "configtest"],
    )
