from setuptools import setup, find_packages

setup(
    name="zkparams",
    version="0.1.0",
    description="Generate, checksum and version the proving and verifying keys of a zero-knowledge proving system",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "elliptic_curves @ git+https://github.com/nchain-innovation/elliptic_curves.git",
        "tx-engine",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "zkparams-setup=zkparams.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.11",
)
