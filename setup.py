#!/usr/bin/env python

from setuptools import setup

__author__ = 'softraster developers'
__version__ = '0.1'

requires = [
    'numpy>=1.9.0'
]


setup(
    name='softraster',
    version=__version__,
    author=__author__,
    description='Software 3-D rasterizer',
    packages=['softraster'],
    install_requires=requires,
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3'
    ]
)
