"""
setup.py for ginger, the ninja build file generator

Requirements:
- Python >= 3.10
- ninja (only to run the generated build.ninja files)

Install for development with: pip install -e ".[dev]"
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="ginger",
    version="1.0.0",
    description="Generates ninja build files from a ginger project description and a source tree",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ginger", "ginger.*"]),
    package_data={
        "ginger": [
            "config/defaults.yaml",
        ]
    },
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "ginger=ginger.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: 3.14",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
    ],
)
