#!/usr/bin/env python3
import os
import re

from setuptools import setup, find_packages


def read_version():
    here = os.path.dirname(os.path.realpath(__file__))
    with open(os.path.join(here, "src", "distrkit", "_version.py")) as f:
        return re.search(r'version\s*=\s*"([^"]+)"', f.read()).group(1)


setup(
    name='distrkit',
    version=read_version(),
    description='Density, distribution, quantile and sampling functions for a catalog of closed-form distributions',
    long_description='',
    package_dir={'': 'src'},
    packages=find_packages('src'),
    python_requires='>=3.9',
    install_requires=[
        'numba',
        'numpy',
        'scipy>=1.7',
        'colorlog',
    ],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
)
