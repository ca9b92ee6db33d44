import codecs
import os
import re

from setuptools import find_packages, setup


def read_file(filename, encoding='utf8'):
    """Read unicode from given file."""
    with codecs.open(filename, encoding=encoding) as fd:
        return fd.read()


here = os.path.abspath(os.path.dirname(__file__))

# read version number (and other metadata) from package init
init_fn = os.path.join(here, 'src', 'apache_toolkit', '__init__.py')
meta = dict(re.findall(r"""__([a-z]+)__ = '([^']+)""", read_file(init_fn)))

readme = read_file(os.path.join(here, 'README.rst'))
version = meta['version']

install_requires = [
    'ConfigArgParse>=1.5.3',
    'distro>=1.0.1',
]

test_extras = [
    'pytest',
]

dev_extras = [
    'coverage',
    'mypy',
    'pylint',
    'pytest-cov',
]

setup(
    name='apache-toolkit',
    version=version,
    description="Install, configure and run Apache on Ubuntu, Fedora and SUSE",
    long_description=readme,
    license='Apache License 2.0',
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: System :: Installation/Setup',
        'Topic :: System :: Systems Administration',
        'Topic :: Utilities',
    ],

    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,

    install_requires=install_requires,
    extras_require={
        'dev': dev_extras + test_extras,
        'test': test_extras,
    },

    entry_points={
        'console_scripts': [
            'apache-toolkit = apache_toolkit.main:main',
        ],
    },
)
