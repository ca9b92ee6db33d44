"""Apache toolkit constants."""
import enum
import logging
import os
from typing import Any
from typing import Dict


class DistroFamily(enum.Enum):
    """Packaging and service conventions a host follows."""

    UBUNTU = "ubuntu"
    """Debian style: apt, a2enmod/a2ensite, apache2 service"""
    FEDORA = "fedora"
    """RHEL style: dnf, conf.d fragments, httpd service"""
    SUSE = "suse"
    """SUSE style: zypper, a2enmod, vhosts.d"""
    UNSUPPORTED = "unsupported"
    """Anything else"""


DISTRO_FAMILIES: Dict[str, DistroFamily] = {
    "debian": DistroFamily.UBUNTU,
    "linuxmint": DistroFamily.UBUNTU,
    "raspbian": DistroFamily.UBUNTU,
    "ubuntu": DistroFamily.UBUNTU,
    "almalinux": DistroFamily.FEDORA,
    "amzn": DistroFamily.FEDORA,
    "centos": DistroFamily.FEDORA,
    "cloudlinux": DistroFamily.FEDORA,
    "fedora": DistroFamily.FEDORA,
    "ol": DistroFamily.FEDORA,
    "rhel": DistroFamily.FEDORA,
    "rocky": DistroFamily.FEDORA,
    "scientific": DistroFamily.FEDORA,
    "opensuse": DistroFamily.SUSE,
    "opensuse-leap": DistroFamily.SUSE,
    "opensuse-tumbleweed": DistroFamily.SUSE,
    "sles": DistroFamily.SUSE,
    "suse": DistroFamily.SUSE,
}
"""Map of ``distro.id()`` and ``ID_LIKE`` values to distribution families"""

CLI_DEFAULTS: Dict[str, Any] = dict(  # noqa
    config_files=[
        "/etc/apache-toolkit/cli.ini",
        # https://freedesktop.org/wiki/Software/xdg-user-dirs/
        os.path.join(os.environ.get("XDG_CONFIG_HOME", "~/.config"),
                     "apache-toolkit", "cli.ini"),
    ],

    verbose_count=0,
    quiet=False,
    debug=False,
    logs_dir=None,
    max_log_backups=10,
    distro=None,
    use_python3=True,
    apache_user=None,
    apache_group=None,
    apache_service_name=None,
    apache_config_dir=None,
    apache_settings_dir=None,
    apache_log_dir=None,
)
"""Defaults for CLI flags and `.NamespaceConfig` attributes."""

ENV_VAR_PREFIX = "APACHE_TOOLKIT_"
"""Prefix of the environment variables read by the argument parser."""

STACK_USER_ENV = "STACK_USER"
"""Environment variable naming the deployment's system user."""

QUIET_LOGGING_LEVEL = logging.ERROR
"""Logging level to use in quiet mode."""

DEFAULT_LOGGING_LEVEL = logging.WARNING
"""Default logging level to use when not in quiet mode."""

LOG_FILE_NAME = "apache-toolkit.log"

SITE_EXT = ".conf"
"""Suffix of an Apache site configuration file."""

DISABLED_SUFFIX = ".disabled"
"""Suffix appended to a site configuration file to disable it."""

WSGI_MOD = "wsgi"

RESTART_GRACE_SECONDS = 3
"""Pause between stopping and starting Apache, so the listening ports are
released before the new server binds them."""
