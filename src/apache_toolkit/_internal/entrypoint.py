""" Distribution detection and configurator selection """
import logging
from typing import Any
from typing import Dict
from typing import Optional
from typing import Tuple
from typing import Type

from apache_toolkit import configuration
from apache_toolkit import util
from apache_toolkit._internal import configurator
from apache_toolkit._internal import constants
from apache_toolkit._internal import override_debian
from apache_toolkit._internal import override_fedora
from apache_toolkit._internal import override_suse
from apache_toolkit._internal.constants import DistroFamily

logger = logging.getLogger(__name__)

OVERRIDE_CLASSES: Dict[DistroFamily, Type[configurator.ApacheConfigurator]] = {
    DistroFamily.UBUNTU: override_debian.DebianConfigurator,
    DistroFamily.FEDORA: override_fedora.FedoraConfigurator,
    DistroFamily.SUSE: override_suse.OpenSUSEConfigurator,
    DistroFamily.UNSUPPORTED: configurator.ApacheConfigurator,
}


def get_distro_family(os_name: Optional[str] = None) -> Tuple[DistroFamily, str]:
    """Find the distribution family of the host.

    :param str os_name: distribution identifier, detected when not given

    :returns: the family and the distribution identifier it was found for
    :rtype: tuple

    """
    if not os_name:
        os_name, _ = util.get_os_info()
    os_name = os_name.lower()

    family = constants.DISTRO_FAMILIES.get(os_name)
    if family is None:
        # OS not found in the list
        for os_like in util.get_systemd_os_like():
            family = constants.DISTRO_FAMILIES.get(os_like.lower())
            if family is not None:
                break
    if family is None:
        logger.debug("Distribution %s is not supported", os_name)
        family = DistroFamily.UNSUPPORTED
    return family, os_name


def get_configurator(config: configuration.NamespaceConfig,
                     **kwargs: Any) -> configurator.ApacheConfigurator:
    """Build the configurator matching the host distribution.

    :param config: Configuration, ``config.distro`` forces the
        distribution identifier
    :param kwargs: passed to the configurator constructor

    """
    family, os_name = get_distro_family(config.distro)
    logger.debug("Using %s configuration for %s", family.value, os_name)
    return OVERRIDE_CLASSES[family](config, distro_id=os_name, **kwargs)
