import io
import os
from os import path
import re

from setuptools import find_packages
from setuptools import setup

MYDIR = path.abspath(os.path.dirname(__file__))


def load_version():
    filename = path.join(MYDIR, 'httpcodes', 'version.py')
    with io.open(filename, encoding='utf-8') as version_file:
        match = re.search(
            r"^__version__ = '([^']+)'", version_file.read(), re.MULTILINE
        )

    if match is None:  # pragma: nocover
        raise RuntimeError('unable to determine the httpcodes version')

    return match.group(1)


setup(
    name='httpcodes',
    version=load_version(),
    description=(
        'HTTP status code and method constants with descriptions, '
        'band predicates, and thread-safe registries.'
    ),
    license='Apache-2.0',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries',
    ],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.8',
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
