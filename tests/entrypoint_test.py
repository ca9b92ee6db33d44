"""Test for apache_toolkit._internal.entrypoint for override class resolution"""
import sys
import unittest
from unittest import mock

import pytest

from apache_toolkit import configuration
from apache_toolkit._internal import configurator
from apache_toolkit._internal import constants
from apache_toolkit._internal import entrypoint
from apache_toolkit._internal import override_debian
from apache_toolkit._internal import override_fedora
from apache_toolkit._internal import override_suse
from apache_toolkit._internal.constants import DistroFamily


class DistroFamilyTest(unittest.TestCase):
    """Tests for get_distro_family"""

    def test_known_distributions(self):
        with mock.patch("apache_toolkit.util.get_os_info") as mock_info:
            for distro, family in constants.DISTRO_FAMILIES.items():
                mock_info.return_value = (distro, "whatever")
                assert entrypoint.get_distro_family() == (family, distro)

    def test_examples(self):
        assert entrypoint.get_distro_family("ubuntu")[0] is DistroFamily.UBUNTU
        assert entrypoint.get_distro_family("rhel")[0] is DistroFamily.FEDORA
        assert entrypoint.get_distro_family("opensuse-leap")[0] is DistroFamily.SUSE
        assert entrypoint.get_distro_family("Fedora") == (DistroFamily.FEDORA, "fedora")

    def test_like(self):
        with mock.patch("apache_toolkit.util.get_systemd_os_like") as mock_like:
            mock_like.return_value = ["rhel", "centos", "fedora"]
            assert entrypoint.get_distro_family("eurolinux") == \
                (DistroFamily.FEDORA, "eurolinux")
            mock_like.return_value = ["unknown", "suse"]
            assert entrypoint.get_distro_family("gecko")[0] is DistroFamily.SUSE

    def test_unsupported(self):
        with mock.patch("apache_toolkit.util.get_systemd_os_like") as mock_like:
            mock_like.return_value = []
            assert entrypoint.get_distro_family("gentoo") == \
                (DistroFamily.UNSUPPORTED, "gentoo")
            mock_like.return_value = ["arch"]
            assert entrypoint.get_distro_family("manjaro")[0] is DistroFamily.UNSUPPORTED

    def test_every_family_has_a_configurator(self):
        for family in DistroFamily:
            assert entrypoint.OVERRIDE_CLASSES[family].FAMILY is family


class GetConfiguratorTest(unittest.TestCase):
    """Tests for get_configurator"""

    def _call(self, **kwargs):
        config = configuration.NamespaceConfig.from_defaults(**kwargs)
        return entrypoint.get_configurator(config, service_controller=mock.MagicMock())

    def test_forced_distro(self):
        assert isinstance(self._call(distro="debian"), override_debian.DebianConfigurator)
        assert isinstance(self._call(distro="centos"), override_fedora.FedoraConfigurator)
        assert isinstance(self._call(distro="sles"), override_suse.OpenSUSEConfigurator)

    def test_detected_distro(self):
        with mock.patch("apache_toolkit.util.get_os_info") as mock_info:
            mock_info.return_value = ("fedora", "39")
            result = self._call()
        assert isinstance(result, override_fedora.FedoraConfigurator)
        assert result.distro_id == "fedora"

    def test_unsupported_distro(self):
        with mock.patch("apache_toolkit.util.get_systemd_os_like") as mock_like:
            mock_like.return_value = []
            result = self._call(distro="void")
        assert type(result) is configurator.ApacheConfigurator  # pylint: disable=unidiomatic-typecheck
        assert result.identity is None


if __name__ == "__main__":
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
