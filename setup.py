# setup.py
from setuptools import setup, find_packages

setup(
    name="dirkit",
    version="0.1.0",
    description="Filesystem helpers: relative paths, symlink-aware recursive removal, listings",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirkit=dirkit.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
