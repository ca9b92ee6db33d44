"""Apache toolkit user-supplied configuration."""
import argparse
import copy
import getpass
import grp
import logging
import os
import pwd
from typing import Any

from apache_toolkit import errors
from apache_toolkit._internal import constants

logger = logging.getLogger(__name__)

IDENTITY_OVERRIDES = (
    "apache_service_name",
    "apache_config_dir",
    "apache_settings_dir",
    "apache_log_dir",
)
"""Configuration attributes overriding `.ApacheIdentity` fields."""


class NamespaceConfig:
    """Configuration wrapper around :class:`argparse.Namespace`.

    Attribute lookups are delegated to the wrapped namespace, except for
    ``apache_user`` and ``apache_group`` which fall back to the
    deployment's system user and its primary group when not set.

    :ivar namespace: Namespace typically produced by
        :meth:`argparse.ArgumentParser.parse_args`.
    :type namespace: :class:`argparse.Namespace`

    """

    def __init__(self, namespace: argparse.Namespace) -> None:
        self.namespace: argparse.Namespace
        # Avoid recursion loop because of the delegation defined in __setattr__
        object.__setattr__(self, 'namespace', namespace)

        # Check configuration sanity, and error out in case of problem.
        _check_config_sanity(self)

    @classmethod
    def from_defaults(cls, **kwargs: Any) -> 'NamespaceConfig':
        """Build a configuration for library callers.

        :param kwargs: values overriding `.constants.CLI_DEFAULTS`

        """
        values = copy.deepcopy(constants.CLI_DEFAULTS)
        unknown = set(kwargs) - set(values)
        if unknown:
            raise errors.ConfigurationError(
                "Unknown configuration options: {0}".format(", ".join(sorted(unknown))))
        values.update(kwargs)
        return cls(argparse.Namespace(**values))

    def __getattr__(self, name: str) -> Any:
        return getattr(self.namespace, name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self.namespace, name, value)

    @property
    def apache_user(self) -> str:
        """User the Apache WSGI processes run as."""
        if self.namespace.apache_user:
            return self.namespace.apache_user
        return os.environ.get(constants.STACK_USER_ENV) or getpass.getuser()

    @property
    def apache_group(self) -> str:
        """Group the Apache WSGI processes run as."""
        if self.namespace.apache_group:
            return self.namespace.apache_group
        user = self.apache_user
        try:
            return grp.getgrgid(pwd.getpwnam(user).pw_gid).gr_name
        except KeyError:
            logger.debug("No primary group found for %s, using the user name", user)
            return user


def _check_config_sanity(config: NamespaceConfig) -> None:
    """Validate user configuration.

    :param config: NamespaceConfig instance holding user configuration
    :type config: :class:`apache_toolkit.configuration.NamespaceConfig`

    :raises .errors.ConfigurationError: if an override is unusable

    """
    for name in ("apache_config_dir", "apache_settings_dir", "apache_log_dir"):
        value = getattr(config.namespace, name, None)
        if value is not None and not os.path.isabs(value):
            raise errors.ConfigurationError(
                "{0} must be an absolute path, got {1}".format(name, value))

    service_name = getattr(config.namespace, "apache_service_name", None)
    if service_name is not None and not service_name.strip():
        raise errors.ConfigurationError("apache_service_name cannot be empty")
