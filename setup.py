#!/usr/bin/env python

import os
from setuptools import setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name='bookmarkets',
    version='0.1.0',
    description='GraphQL API over in-memory books, users, markets and reading history',
    long_description=read("README.rst"),
    packages=['bookmarkets', 'bookmarkets.database', 'bookmarkets.graph'],
    package_data={'bookmarkets': ['static/*.html']},
    keywords="graphql books markets",
    install_requires=[
        "graphlayer[graphql]>=0.2.8",
        "Flask",
        "pydantic-settings",
    ],
    extras_require={
        "test": ["pytest", "precisely"],
    },
    entry_points={
        "console_scripts": ["bookmarkets=bookmarkets.server:main"],
    },
    license="BSD-2-Clause",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
