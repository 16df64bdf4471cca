#!/usr/bin/env python

from setuptools import setup

from pathlib import Path
import re

def find_version(path):
    version_file = Path(path).read_text()
    version_match = re.search(r'''^__version__ = ['"]([^'"]*)['"]''', version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setup(
    name="allplayall",
    version=find_version("allplayall/__init__.py"),
    description="Round-robin (all-play-all) tournament schedules using the circle method",
    packages=["allplayall", "allplayall.scripts"],
    python_requires=">=3.8",
    install_requires=[
        "pyyaml",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "allplayall = allplayall.scripts.allplayall_schedule:main",
        ],
    },
)
