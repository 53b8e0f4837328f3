# SPDX-FileCopyrightText: 2025 Secret Recon contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="secret-recon",
    version="0.1.0",
    description="Exact reconstruction of polynomial secrets from mixed-base encoded shares",
    author="Secret Recon contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "click<9.0,>=8.1",
        "PyYAML<7.0,>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-cov>=5.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "secret-recon=secret_recon.cli:main",
        ],
    },
)
