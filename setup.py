# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="permwalk",
    version="0.1.0",
    description="Batch chmod helper: owner-read permission check and directory tree ordering",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["permwalk", "permwalk.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'permwalk=permwalk.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
    ],
)
