"""apache-toolkit main entry point."""
import logging
import sys
from typing import Callable
from typing import Dict
from typing import List
from typing import Optional

import apache_toolkit
from apache_toolkit import configuration
from apache_toolkit._internal import cli
from apache_toolkit._internal import entrypoint
from apache_toolkit._internal import log
from apache_toolkit._internal.configurator import ApacheConfigurator

logger = logging.getLogger(__name__)


def install_wsgi(config: configuration.NamespaceConfig,
                 configurator: ApacheConfigurator) -> None:
    """Install Apache and its WSGI module."""
    configurator.install_apache_wsgi()


def enable_mod(config: configuration.NamespaceConfig,
               configurator: ApacheConfigurator) -> None:
    """Enable an Apache module."""
    configurator.enable_apache_mod(config.name)


def enable_site(config: configuration.NamespaceConfig,
                configurator: ApacheConfigurator) -> None:
    """Enable a site."""
    configurator.enable_apache_site(config.name)


def disable_site(config: configuration.NamespaceConfig,
                 configurator: ApacheConfigurator) -> None:
    """Disable a site."""
    configurator.disable_apache_site(config.name)


def site_config(config: configuration.NamespaceConfig,
                configurator: ApacheConfigurator) -> None:
    """Print the configuration file path of a site."""
    print(configurator.apache_site_config_for(config.name))


def start(config: configuration.NamespaceConfig,
          configurator: ApacheConfigurator) -> None:
    configurator.start()


def stop(config: configuration.NamespaceConfig,
         configurator: ApacheConfigurator) -> None:
    configurator.stop()


def restart(config: configuration.NamespaceConfig,
            configurator: ApacheConfigurator) -> None:
    configurator.restart()


def reload(config: configuration.NamespaceConfig,
           configurator: ApacheConfigurator) -> None:
    configurator.reload()


def status(config: configuration.NamespaceConfig,
           configurator: ApacheConfigurator) -> int:
    """Print whether Apache is running, exit status 3 when it is not."""
    if configurator.is_running():
        print("running")
        return 0
    print("stopped")
    # Same status as systemctl and LSB init scripts for a stopped service
    return 3


def identity(config: configuration.NamespaceConfig,
             configurator: ApacheConfigurator) -> None:
    """Print the Apache service name and directories."""
    for field, value in configurator.resolved_identity()._asdict().items():
        print("{0}={1}".format(field, value))


def version(config: configuration.NamespaceConfig,
            configurator: ApacheConfigurator) -> None:
    """Print the Apache version."""
    print(".".join(str(part) for part in configurator.get_version()))


def config_test(config: configuration.NamespaceConfig,
                configurator: ApacheConfigurator) -> None:
    """Check the Apache configuration."""
    configurator.config_test()
    logger.info("Apache configuration is valid")


VERBS: Dict[str, Callable[[configuration.NamespaceConfig, ApacheConfigurator],
                          Optional[int]]] = {
    "install-wsgi": install_wsgi,
    "enable-mod": enable_mod,
    "enable-site": enable_site,
    "disable-site": disable_site,
    "site-config": site_config,
    "start": start,
    "stop": stop,
    "restart": restart,
    "reload": reload,
    "status": status,
    "identity": identity,
    "version": version,
    "config-test": config_test,
}


def main(cli_args: Optional[List[str]] = None) -> Optional[int]:
    """Run apache-toolkit.

    :param cli_args: command line to apache-toolkit, defaults to ``sys.argv[1:]``
    :type cli_args: `list` of `str`

    :returns: value for `sys.exit` about the exit status
    :rtype: `int` or `None`

    """
    if cli_args is None:
        cli_args = sys.argv[1:]

    log.pre_arg_parse_setup()

    logger.debug("apache-toolkit version: %s", apache_toolkit.__version__)
    logger.debug("Arguments: %r", cli_args)

    # note: arg parser internally handles --help (and exits afterwards)
    args = cli.prepare_and_parse_args(cli_args)
    config = configuration.NamespaceConfig(args)
    log.post_arg_parse_setup(config)

    configurator = entrypoint.get_configurator(config)
    return VERBS[config.verb](config, configurator)
