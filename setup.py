import os
import re

from setuptools import setup, find_packages


# ----------------------------------------------------------------------------------------------------------------------
# Read the version information without importing the package and its dependencies

basedir = 'src'

with open(os.path.join(os.path.dirname(__file__), basedir, 'numinterval', 'version.py')) as f:
    _version = '.'.join(
        re.search(r'VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH = \((\d+), (\d+), (\d+)\)', f.read()).groups()
    )

# ----------------------------------------------------------------------------------------------------------------------

setup(
    name='numinterval',
    version=_version,
    description='Numeric intervals with inclusive/exclusive boundaries, parsing and point comparison',
    package_dir={'': basedir},
    packages=find_packages(basedir),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'dnutils',
    ],
    extras_require={
        'test': [
            'ddt',
            'pytest',
        ]
    },
)
