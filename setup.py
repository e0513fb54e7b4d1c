#!/usr/bin/env python
from setuptools import setup

setup(name='sculpt',
      version='0.1',
      description='Parser for the sculpt macro-invocation language',
      packages=['sculpt'],
      python_requires='>=3.7',
      install_requires=['lark>=1.1', 'dataslots>=1.0,<1.2'],
      extras_require={'test': ['pytest']},
)
