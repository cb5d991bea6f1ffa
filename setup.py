#!/usr/bin/env python

from setuptools import setup

setup(
    name='inkcanvas',
    version='0.1',
    description='Read, draw and write digital ink in the InkML format',
    author='Daniel Vorberg',
    author_email='dv@pks.mpg.de',
    packages=['inkcanvas'],
    package_dir={'inkcanvas': 'inkcanvas'},
    entry_points={
      'console_scripts': [
          'ink-canvas = inkcanvas.__main__:main'
      ]
    },
    install_requires=[
        'cairocffi',
        'numpy',
        ],
    extras_require={
        'test': ['pytest'],
        },
    zip_safe=True,
    long_description=""" """)
