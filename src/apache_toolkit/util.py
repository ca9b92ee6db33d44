"""Utilities for all apache-toolkit."""
import logging
import os
import platform
import subprocess
import sys
from typing import Callable
from typing import List
from typing import Tuple

from apache_toolkit import errors

_USE_DISTRO = sys.platform.startswith('linux')
if _USE_DISTRO:
    import distro

logger = logging.getLogger(__name__)


def run_script(params: List[str], log: Callable[[str], None] = logger.error) -> Tuple[str, str]:
    """Run the script with the given params.

    :param list params: List of parameters to pass to subprocess.run
    :param callable log: Logger method to use for errors

    :returns: stdout and stderr of the finished process
    :rtype: `tuple` of `str`

    :raises .errors.SubprocessError: if the command cannot be run or exits
        with a non-zero status

    """
    logger.debug("Running %s", " ".join(params))
    try:
        proc = subprocess.run(params,
                              check=False,
                              stdout=subprocess.PIPE,
                              stderr=subprocess.PIPE,
                              universal_newlines=True)

    except (OSError, ValueError):
        msg = "Unable to run the command: %s" % " ".join(params)
        log(msg)
        raise errors.SubprocessError(msg)

    if proc.returncode != 0:
        msg = "Error while running %s.\n%s\n%s" % (
            " ".join(params), proc.stdout, proc.stderr)
        log(msg)
        raise errors.SubprocessError(msg)

    return proc.stdout, proc.stderr


def probe_script(params: List[str]) -> bool:
    """Run a query command and report whether it succeeded.

    A failing query is an answer, not an error, so failures are only
    logged at debug level.

    :param list params: List of parameters to pass to subprocess.run

    :returns: True if the command exited with status 0
    :rtype: bool

    """
    try:
        run_script(params, log=logger.debug)
    except errors.SubprocessError:
        return False
    return True


def exe_exists(exe: str) -> bool:
    """Determine whether path/name refers to an executable.

    :param str exe: Executable path or name

    :returns: If exe is a valid executable
    :rtype: bool

    """
    path, _ = os.path.split(exe)
    if path:
        return _is_executable(exe)
    for path in os.environ.get("PATH", "").split(os.pathsep):
        if _is_executable(os.path.join(path, exe)):
            return True

    return False


def _is_executable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.X_OK)


def get_os_info() -> Tuple[str, str]:
    """
    Get OS name and version

    :returns: (os_name, os_version)
    :rtype: `tuple` of `str`
    """
    os_type, os_ver, _ = platform.system_alias(
        platform.system(),
        platform.release(),
        platform.version()
    )
    os_type = os_type.lower()
    if os_type.startswith('linux') and _USE_DISTRO:
        distro_name, distro_version = distro.id(), distro.version()
        # On some rolling releases these values are empty strings
        if distro_name:
            os_type = distro_name
        if distro_version:
            os_ver = distro_version
    return os_type, os_ver


def get_systemd_os_like() -> List[str]:
    """
    Get a list of strings that indicate the distribution likeness to
    other distributions.

    :returns: List of distribution acronyms
    :rtype: `list` of `str`
    """

    if _USE_DISTRO:
        return [like for like in distro.like().split(" ") if like]
    return []
