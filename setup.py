from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="smallestcircle",
    version="0.1.0",
    description="Smallest enclosing circle of 2D points by randomized incremental construction",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=["numpy>=1.22", "joblib>=1.2"],
    extras_require={"test": ["pytest>=7"]},
)
