# setup.py
from setuptools import setup, find_packages

setup(
    name="wintree",
    version="1.0.0",
    description="Windows-style directory tree viewer for the terminal",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={
        "wintree": ["interface/locales/*.json"],
    },
    install_requires=[
        "pyuca",  # Unicode collation for locale-aware entry ordering
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wintree=wintree.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
