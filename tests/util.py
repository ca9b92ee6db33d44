"""Common utilities for apache_toolkit tests."""
import logging
import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

from apache_toolkit import configuration
from apache_toolkit import interfaces


class TempDirTestCase(unittest.TestCase):
    """Base test class which sets up and tears down a temporary directory"""

    def setUp(self):
        self.tempdir = tempfile.mkdtemp()

    def tearDown(self):
        # Remove handlers installed by the logging setup of the tested code
        logging.getLogger().handlers = []
        sys.excepthook = sys.__excepthook__
        shutil.rmtree(self.tempdir)


class ConfiguratorTest(TempDirTestCase):
    """Builds a configurator of ``CONFIGURATOR_CLASS`` whose configuration
    directory is the temporary directory."""

    CONFIGURATOR_CLASS = None

    def setUp(self):
        super().setUp()
        self.installer = mock.MagicMock(spec=interfaces.PackageInstaller)
        self.installer.is_installed.return_value = False
        self.service = mock.MagicMock(spec=interfaces.ServiceController)
        self.config, self.configurator = self.get_configurator(
            apache_config_dir=self.tempdir)

    def get_configurator(self, **kwargs):
        """Create a configurator with the given configuration overrides."""
        config = configuration.NamespaceConfig.from_defaults(**kwargs)
        return config, self.CONFIGURATOR_CLASS(
            config, installer=self.installer,
            service_controller=self.service, distro_id="test")

    def site_path(self, name):
        """Path of a file in the configuration directory."""
        return os.path.join(self.tempdir, name)

    def touch(self, name, content=""):
        """Create a file in the configuration directory."""
        with open(self.site_path(name), "w") as f:
            f.write(content)
