#!/usr/bin/env python

from setuptools import setup
import cookier

setup(
    name='cookier',
    version=cookier.__version__.replace('-', '.'),
    description='Prefix-aware cookie manager for WSGI applications',
    python_requires='>=3.8',
    packages = ['cookier',
                'cookier.config',
                'cookier.scripts',
                'cookier.server',
                'cookier.server.wsgi'],
    package_data = {'cookier.config': ['cookier.conf']},
    install_requires = ['itsdangerous >= 2.0',
                        'python-slugify >= 5.0'],
    extras_require = {'test': ['pytest', 'nox']},
)
