#!/usr/bin/env python3
"""Install Tsys."""

import io
import re

from os import path
from setuptools import setup, find_packages

root = path.abspath(path.dirname(__file__))

def read(*filenames, **kwargs):
    encoding = kwargs.get('encoding', 'utf-8')
    sep = kwargs.get('sep', '\n')
    buf = []
    for filename in filenames:
        with io.open(path.join(root, filename), encoding=encoding) as f:
            buf.append(f.read())
    return sep.join(buf)

long_description = read('README.md')
version = re.search(r'^__version__ = "(.+)"$',
                    read('tsys/__init__.py'), re.M).group(1)

setup(
    name = "Tsys",
    version = version,
    description = "System temperature from radio telescope ON/OFF calibration",
    license = "GPL v3",
    keywords = [
        "system temperature",
        "radio astronomy",
        "flux calibration",
        "radiometry",
        "Python"
    ],
    packages=find_packages(exclude=['tests']),
    install_requires=[
        'matplotlib',
        'numpy',
        'scipy'
    ],
    extras_require={'test': ['pytest', 'pytest-cov'],},
    long_description=long_description,
    long_description_content_type='text/markdown',
    platforms='any',
    python_requires='>=3.6',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Physics",
        "Topic :: Scientific/Engineering :: Astronomy",
    ],
)
