"""apache-toolkit command line argument parsing"""
import argparse
import copy
from typing import Any
from typing import List

import configargparse

import apache_toolkit
from apache_toolkit._internal import constants

VERB_HELP = (
    ("install-wsgi", "Install Apache and its WSGI module", None),
    ("enable-mod", "Enable an Apache module", "module"),
    ("enable-site", "Enable a site", "site"),
    ("disable-site", "Disable a site", "site"),
    ("site-config", "Print the configuration file path of a site", "site"),
    ("start", "Start Apache", None),
    ("stop", "Stop Apache", None),
    ("restart", "Stop Apache, wait for its ports to be released, start it", None),
    ("reload", "Reload the Apache configuration", None),
    ("status", "Print whether Apache is running", None),
    ("identity", "Print the Apache service name and directories", None),
    ("version", "Print the Apache version", None),
    ("config-test", "Check the Apache configuration", None),
)
"""Verbs, their help and the name of their positional argument"""


VERB_ARGUMENTS = {verb: argument for verb, _, argument in VERB_HELP}


def flag_default(name: str) -> Any:
    """Default value for CLI flag."""
    return copy.deepcopy(constants.CLI_DEFAULTS[name])


def _build_parser() -> configargparse.ArgParser:
    parser = configargparse.ArgParser(
        prog="apache-toolkit",
        description="Install, configure and run Apache on Ubuntu, Fedora and SUSE.",
        epilog="\n".join("{0:<14}{1}".format(verb, help_text)
                         for verb, help_text, _ in VERB_HELP),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        args_for_setting_config_path=["-c", "--config"],
        default_config_files=flag_default("config_files"),
        config_arg_help_message="path to config file (default: {0})".format(
            " and ".join(flag_default("config_files"))),
        auto_env_var_prefix=constants.ENV_VAR_PREFIX)

    parser.add_argument(
        "--version", action="version",
        version="%(prog)s {0}".format(apache_toolkit.__version__))
    parser.add_argument(
        "-v", "--verbose", dest="verbose_count", action="count",
        default=flag_default("verbose_count"),
        help="This flag can be used multiple times to incrementally "
             "increase the verbosity of output, e.g. -vvv.")
    parser.add_argument(
        "-q", "--quiet", dest="quiet", action="store_true",
        default=flag_default("quiet"),
        help="Silence all output except errors.")
    parser.add_argument(
        "--debug", action="store_true", default=flag_default("debug"),
        help="Show tracebacks in case of errors.")
    parser.add_argument(
        "--logs-dir", default=flag_default("logs_dir"),
        help="Directory of the rotating debug log. No log file is written "
             "when not set.")
    parser.add_argument(
        "--max-log-backups", type=int, default=flag_default("max_log_backups"),
        help="Number of rotated log files to keep.")
    parser.add_argument(
        "--distro", default=flag_default("distro"),
        help="Distribution identifier to use instead of the detected one "
             "(e.g. ubuntu, fedora, opensuse-leap).")
    parser.add_argument(
        "--no-python3", dest="use_python3", action="store_false",
        default=flag_default("use_python3"),
        help="Install the legacy Python 2 WSGI module.")
    parser.add_argument(
        "--apache-user", default=flag_default("apache_user"),
        help="User running the WSGI processes (default: $STACK_USER or the "
             "current user).")
    parser.add_argument(
        "--apache-group", default=flag_default("apache_group"),
        help="Group running the WSGI processes (default: primary group of "
             "the Apache user).")
    parser.add_argument(
        "--apache-service-name", default=flag_default("apache_service_name"),
        help="Name of the Apache service (default: distribution specific).")
    parser.add_argument(
        "--apache-config-dir", default=flag_default("apache_config_dir"),
        help="Directory of the site configuration files (default: "
             "distribution specific).")
    parser.add_argument(
        "--apache-settings-dir", default=flag_default("apache_settings_dir"),
        help="Directory of the global configuration snippets (default: "
             "distribution specific).")
    parser.add_argument(
        "--apache-log-dir", default=flag_default("apache_log_dir"),
        help="Directory of the Apache logs (default: distribution specific).")

    parser.add_argument(
        "verb", choices=[verb for verb, _, _ in VERB_HELP], metavar="VERB",
        help="One of: " + ", ".join(verb for verb, _, _ in VERB_HELP))
    parser.add_argument(
        "name", nargs="?", metavar="NAME",
        help="Module or site the verb applies to.")
    return parser


def prepare_and_parse_args(args: List[str]) -> argparse.Namespace:
    """Returns parsed command line arguments.

    Values are looked up, from lowest to highest precedence, in the
    defaults, the config files, the ``APACHE_TOOLKIT_*`` environment
    variables and the command line.

    :param list args: command line arguments with the program name removed

    :returns: parsed command line arguments
    :rtype: argparse.Namespace

    """
    parser = _build_parser()
    parsed = parser.parse_args(args)
    argument = VERB_ARGUMENTS[parsed.verb]
    if argument and parsed.name is None:
        parser.error("{0} requires a {1} name".format(parsed.verb, argument))
    if not argument and parsed.name is not None:
        parser.error("{0} takes no argument, got {1!r}".format(parsed.verb, parsed.name))
    return parsed
