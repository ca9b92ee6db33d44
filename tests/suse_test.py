"""Test for apache_toolkit._internal.configurator for OpenSUSE overrides"""
import os
import sys
from unittest import mock

import pytest

from apache_toolkit import errors
from apache_toolkit._internal import override_suse
from apache_toolkit._internal.configurator import ApacheIdentity
import util


def _a2enmod_query(enabled):
    """run_script side effect where a2enmod -q answers for the given mods"""
    def run_script(params, log=None):
        if params[:2] == ["a2enmod", "-q"] and params[2] not in enabled:
            raise errors.SubprocessError("not enabled")
        return "", ""
    return run_script


class OpenSUSEConfiguratorTest(util.ConfiguratorTest):
    """Tests for the OpenSUSE configurator"""

    CONFIGURATOR_CLASS = override_suse.OpenSUSEConfigurator

    def test_defaults(self):
        _, configurator = self.get_configurator()
        assert configurator.identity == ApacheIdentity(
            service_name="apache2",
            config_dir="/etc/apache2/vhosts.d",
            settings_dir="/etc/apache2/conf.d",
            log_dir="/var/log/apache2")

    @mock.patch("apache_toolkit.util.run_script")
    def test_install_apache_wsgi(self, mock_run):
        mock_run.side_effect = _a2enmod_query(enabled=["wsgi"])
        self.configurator.install_apache_wsgi()
        self.installer.install.assert_called_once_with(
            "apache2", "apache2-mod_wsgi-python3")
        assert self.installer.uninstall.called is False
        mock_run.assert_called_once_with(["a2enmod", "-q", "wsgi"], log=mock.ANY)

    @mock.patch("apache_toolkit.util.run_script")
    def test_install_apache_wsgi_legacy(self, mock_run):
        mock_run.side_effect = _a2enmod_query(enabled=["wsgi"])
        _, configurator = self.get_configurator(
            apache_config_dir=self.tempdir, use_python3=False)
        configurator.install_apache_wsgi()
        self.installer.install.assert_called_once_with("apache2", "apache2-mod_wsgi")

    @mock.patch("apache_toolkit.util.run_script")
    def test_install_enables_wsgi(self, mock_run):
        mock_run.side_effect = _a2enmod_query(enabled=[])
        self.configurator.install_apache_wsgi()
        mock_run.assert_any_call(["a2enmod", "wsgi"])
        self.service.stop.assert_called_once_with("apache2")
        self.service.start.assert_called_once_with("apache2")

    @mock.patch("apache_toolkit.util.run_script")
    def test_enable_mod_already_enabled(self, mock_run):
        mock_run.side_effect = _a2enmod_query(enabled=["rewrite"])
        self.configurator.enable_apache_mod("rewrite")
        assert mock_run.call_count == 1
        assert self.service.method_calls == []

    @mock.patch("apache_toolkit.util.run_script")
    def test_enable_mod(self, mock_run):
        mock_run.side_effect = _a2enmod_query(enabled=[])
        self.configurator.enable_apache_mod("rewrite")
        assert mock_run.call_args_list[-1] == mock.call(["a2enmod", "rewrite"])
        assert [c[0] for c in self.service.method_calls] == ["stop", "start"]

    @mock.patch("apache_toolkit.util.run_script")
    def test_enable_mod_failure(self, mock_run):
        def run_script(params, log=None):
            raise errors.SubprocessError("failed")
        mock_run.side_effect = run_script
        with pytest.raises(errors.SubprocessError):
            self.configurator.enable_apache_mod("rewrite")
        assert self.service.method_calls == []

    def test_site_rename(self):
        self.touch("glance.conf.disabled")
        assert self.configurator.apache_site_config_for("glance") == \
            self.site_path("glance.conf.disabled")
        self.configurator.enable_apache_site("glance")
        assert os.listdir(self.tempdir) == ["glance.conf"]
        self.configurator.disable_apache_site("glance")
        assert os.listdir(self.tempdir) == ["glance.conf.disabled"]

    def test_enable_missing_site(self):
        self.configurator.enable_apache_site("glance")
        self.configurator.disable_apache_site("glance")
        assert os.listdir(self.tempdir) == []

    @mock.patch("apache_toolkit.util.run_script")
    def test_get_version(self, mock_run):
        mock_run.return_value = ("Server version: Apache/2.4.51 (Linux/SUSE)\n", "")
        assert self.configurator.get_version() == (2, 4, 51)
        mock_run.assert_called_once_with(["apachectl", "-v"])


if __name__ == "__main__":
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
