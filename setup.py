"""
Setup script to make momentum_core pip-installable
"""

from setuptools import setup, find_packages

setup(
    name="momentum-core",
    version="0.1.0",
    description="Rolling averages and multi-period momentum scores over price histories",
    author="TradLyte Team",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "polars>=1.0.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
)
