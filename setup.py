"""Packaging for TalkTimer.

Install for development:
    pip install -e .[test]

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "TalkTimer",
        "CFBundleDisplayName": "TalkTimer",
        "CFBundleIdentifier": "com.talktimer.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

py2app_kwargs = {}
if "py2app" in sys.argv:
    py2app_kwargs = dict(
        app=APP,
        data_files=DATA_FILES,
        options={"py2app": OPTIONS},
        setup_requires=["py2app"],
    )

setup(
    name="TalkTimer",
    version="0.1.0",
    packages=["talktimer", "talktimer.timer", "talktimer.ui", "talktimer.audio"],
    python_requires=">=3.10",
    install_requires=[
        "PyQt6",
        "numpy",
        "loguru",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["talktimer = talktimer.__main__:main"]},
    **py2app_kwargs,
)
