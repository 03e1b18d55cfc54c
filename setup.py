"""Package setup for dsn_request."""

from setuptools import setup, find_packages

setup(
    name="dsn-request",
    version="1.0.0",
    description="Structured URL/DSN builder and single-shot HTTP request dispatcher",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=2.0.0",
    ],
    extras_require={
        "ui": [
            "colorlog>=6.8.0",
        ],
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dsn-request=dsn_request.cli:main",
        ],
    },
)
