# setup.py

from setuptools import setup, find_packages

setup(
    name="fenwick-tree",
    version="0.1.0",
    author="Kushagra Bharti",
    description="Fenwick (binary indexed) tree for point updates and prefix sums",
    packages=find_packages(exclude=["tests*", "benchmarks*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
