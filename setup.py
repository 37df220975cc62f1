#!/usr/bin/env python

"""vdspiral designs variable density spiral gradients and trajectories for MRI."""
import os
import io

from setuptools import find_packages, setup

# Package meta-data
NAME = "vdspiral"
DESCRIPTION = "Variable density spiral gradient and k-space trajectory design for MRI."
AUTHOR = "vdspiral developers"
REQUIRES_PYTHON = ">=3.10.0"
VERSION = "0.1.0"
CLASSIFIERS = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python",
    "Topic :: Scientific/Engineering"]

here = os.path.abspath(os.path.dirname(__file__))

# Source package requirements from requirements.txt
with open(os.path.join(here, 'requirements.txt')) as open_file:
    install_requires = open_file.read().splitlines()

# Source test requirements from develop.txt
with open(os.path.join(here, 'develop.txt')) as open_file:
    tests_requires = open_file.read().splitlines()

# Import the README and use it as the long-description.
# Note: this will only work if 'README.md' is present in your MANIFEST.in file!
try:
    with io.open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        long_description = '\n' + f.read()
except FileNotFoundError:
    long_description = DESCRIPTION

# Where the magic happens:
setup(
    name=NAME,
    version=VERSION,
    description=DESCRIPTION,
    long_description=long_description,
    long_description_content_type='text/markdown',
    author=AUTHOR,
    python_requires=REQUIRES_PYTHON,
    classifiers=CLASSIFIERS,
    package_dir={'': 'src'},
    packages=find_packages('src'),
    install_requires=install_requires,
    tests_require=tests_requires,
    extras_require={'test': tests_requires, 'develop': tests_requires},
    include_package_data=True,
)
