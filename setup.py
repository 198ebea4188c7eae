#!/usr/bin/env python3

from setuptools import setup, find_packages

requires = []

extras = {
    'test': [
        "pytest (>=7.0)",
    ],
}

setup(name='Bin-calc',
      version='1.0.1',
      description='Calculator for arithmetic expressions written in binary',
      install_requires=requires,
      extras_require=extras,
      python_requires='>=3.7',
      scripts=['bin-calc.py'],
      packages=find_packages(exclude=['tests']))
