"""Tests for apache_toolkit.util."""
import os
import stat
import sys
import unittest
from unittest import mock

import pytest

from apache_toolkit import errors
import util as test_util


class RunScriptTest(unittest.TestCase):
    """Tests for apache_toolkit.util.run_script."""
    @classmethod
    def _call(cls, params, log=None):
        from apache_toolkit.util import run_script
        if log is None:
            return run_script(params)
        return run_script(params, log=log)

    @mock.patch("apache_toolkit.util.subprocess.run")
    def test_default(self, mock_run):
        mock_run().returncode = 0
        mock_run().stdout = "stdout"
        mock_run().stderr = "stderr"
        out, err = self._call(["test"])
        assert out == "stdout"
        assert err == "stderr"

    @mock.patch("apache_toolkit.util.subprocess.run")
    def test_bad_process(self, mock_run):
        mock_run.side_effect = OSError

        with pytest.raises(errors.SubprocessError):
            self._call(["test"])

    @mock.patch("apache_toolkit.util.subprocess.run")
    def test_failure(self, mock_run):
        mock_run().returncode = 1
        mock_run().stdout = ""
        mock_run().stderr = "Job for apache2.service failed"
        log = mock.MagicMock()

        with pytest.raises(errors.SubprocessError, match="apache2.service"):
            self._call(["systemctl", "start", "apache2"], log=log)
        assert log.called is True

    @mock.patch("apache_toolkit.util.subprocess.run")
    def test_command_is_not_run_through_shell(self, mock_run):
        mock_run().returncode = 0
        self._call(["a2ensite", "horizon; reboot"])
        args, kwargs = mock_run.call_args
        assert args[0] == ["a2ensite", "horizon; reboot"]
        assert kwargs.get("shell", False) is False


class ProbeScriptTest(unittest.TestCase):
    """Tests for apache_toolkit.util.probe_script."""

    @mock.patch("apache_toolkit.util.run_script")
    def test_success(self, mock_run):
        from apache_toolkit.util import probe_script
        assert probe_script(["a2query", "-m", "wsgi"]) is True

    @mock.patch("apache_toolkit.util.run_script")
    def test_failure_is_logged_at_debug(self, mock_run):
        from apache_toolkit import util
        mock_run.side_effect = errors.SubprocessError("No module matches")
        assert util.probe_script(["a2query", "-m", "wsgi"]) is False
        mock_run.assert_called_once_with(["a2query", "-m", "wsgi"],
                                         log=util.logger.debug)


class ExeExistsTest(test_util.TempDirTestCase):
    """Tests for apache_toolkit.util.exe_exists."""

    @classmethod
    def _call(cls, exe):
        from apache_toolkit.util import exe_exists
        return exe_exists(exe)

    def _make_exe(self, name, mode=stat.S_IRWXU):
        path = os.path.join(self.tempdir, name)
        with open(path, "w") as f:
            f.write("#!/bin/sh\n")
        os.chmod(path, mode)
        return path

    def test_exe_exists(self):
        assert self._call(self._make_exe("a2enmod")) is True

    def test_exe_not_executable(self):
        assert self._call(self._make_exe("a2enmod", stat.S_IRUSR)) is False

    def test_exe_missing(self):
        assert self._call(os.path.join(self.tempdir, "a2enmod")) is False

    def test_exe_on_path(self):
        self._make_exe("systemctl")
        with mock.patch.dict(os.environ, {"PATH": self.tempdir}):
            assert self._call("systemctl") is True
            assert self._call("service") is False


class OsInfoTest(unittest.TestCase):
    """Tests for get_os_info and get_systemd_os_like"""

    @mock.patch("apache_toolkit.util.distro")
    def test_get_os_info(self, mock_distro):
        from apache_toolkit import util
        mock_distro.id.return_value = "opensuse-leap"
        mock_distro.version.return_value = "15.5"
        with mock.patch("platform.system_alias") as mock_alias:
            mock_alias.return_value = ("linux", "6.1", "")
            assert util.get_os_info() == ("opensuse-leap", "15.5")

    @mock.patch("apache_toolkit.util.distro")
    def test_get_os_info_rolling_release(self, mock_distro):
        from apache_toolkit import util
        mock_distro.id.return_value = "opensuse-tumbleweed"
        mock_distro.version.return_value = ""
        with mock.patch("platform.system_alias") as mock_alias:
            mock_alias.return_value = ("linux", "6.5", "")
            assert util.get_os_info() == ("opensuse-tumbleweed", "6.5")

    @mock.patch("apache_toolkit.util.distro")
    def test_get_systemd_os_like(self, mock_distro):
        from apache_toolkit import util
        mock_distro.like.return_value = "rhel centos fedora"
        assert util.get_systemd_os_like() == ["rhel", "centos", "fedora"]
        mock_distro.like.return_value = ""
        assert util.get_systemd_os_like() == []


if __name__ == "__main__":
    sys.exit(pytest.main(sys.argv[1:] + [__file__]))  # pragma: no cover
