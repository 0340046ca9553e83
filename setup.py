"""Compatibility setup.py for older setuptools/pip editable installs."""

from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).resolve().parent
README = (ROOT / "README.md").read_text(encoding="utf-8")

about: dict[str, str] = {}
exec((ROOT / "streetmangler" / "__init__.py").read_text(encoding="utf-8"), about)

setup(
    name="streetmangler",
    version=about["__version__"],
    description="Street name validation and correction against per-locale dictionaries",
    long_description=README,
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
    packages=find_packages(include=["streetmangler", "streetmangler.*"]),
    include_package_data=True,
    package_data={"streetmangler": ["data/locales/*.yaml"]},
    install_requires=[
        "pyyaml>=6.0",
        "rapidfuzz>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "streetmangler=streetmangler.cli:main",
        ]
    },
)
