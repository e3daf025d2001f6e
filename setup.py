# Copyright 2016 DataStax, Inc.
#
# Licensed under the DataStax DSE Driver License;
# you may not use this file except in compliance with the License.
#
# You may obtain a copy of the License at
#
# http://www.datastax.com/terms/datastax-dse-driver-license-terms

from geosystems import __version__

from setuptools import setup

long_description = ""
with open("README.rst") as f:
    long_description = f.read()

test_dependencies = ['pytest', 'mock']

setup(
    name='elephant-geosystems',
    version=__version__,
    description='WKT polygon and multi-polygon parsing, serialization and geometry helpers',
    long_description=long_description,
    packages=['geosystems'],
    keywords='wkt,polygon,multipolygon,geometry',
    include_package_data=True,
    install_requires=[],
    tests_require=test_dependencies,
    extras_require={'test': test_dependencies},
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Scientific/Engineering :: GIS',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ])
