from setuptools import setup, find_packages

setup(
    name="checkers_core",
    version="0.1.0",
    packages=find_packages(include=["checkers_core", "checkers_core.*"]),
    install_requires=[
        "numpy>=1.24.3",
        "click>=8.0.0",
        "pytest>=7.4.0",
    ],
    entry_points={
        'console_scripts': [
            'checkers=checkers_core.cli.main:cli',
        ],
    },
    python_requires=">=3.9",
)
