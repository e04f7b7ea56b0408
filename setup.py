"""
Setup script for access-guide.

Access Guide is the contextual help engine for accessibility
self-assessments. It serves three roles:

1. Content Store - Bundled guidance entries indexed by question id
2. Session Engine - Open / close / navigate state for a help panel
3. Terminal Browser - Read and search guidance from the command line

The 'accessguide' command is the primary entry point.
"""

from setuptools import find_packages, setup

setup(
    name="access-guide",
    version="1.0.0",
    description="Contextual accessibility guidance retrieval and navigation engine",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Access Guide",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"accessguide": ["data/help/*.json"]},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "accessguide=accessguide.delivery.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="accessibility guidance help cli self-assessment",
)
