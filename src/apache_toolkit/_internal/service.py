"""Service manager wrapper."""
import logging
from typing import List

from apache_toolkit import interfaces
from apache_toolkit import util

logger = logging.getLogger(__name__)


class SystemdServiceController(interfaces.ServiceController):
    """Drives services with systemctl, or service(8) without systemd."""

    def _command(self, verb: str, name: str) -> List[str]:
        if util.exe_exists("systemctl"):
            return ["systemctl", verb, name]
        return ["service", name, verb]

    def start(self, name: str) -> None:
        logger.info("Starting %s", name)
        util.run_script(self._command("start", name))

    def stop(self, name: str) -> None:
        logger.info("Stopping %s", name)
        util.run_script(self._command("stop", name))

    def reload(self, name: str) -> None:
        logger.info("Reloading %s", name)
        util.run_script(self._command("reload", name))

    def is_active(self, name: str) -> bool:
        if util.exe_exists("systemctl"):
            return util.probe_script(["systemctl", "is-active", "--quiet", name])
        return util.probe_script(["service", name, "status"])
