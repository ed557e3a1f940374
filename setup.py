from setuptools import find_packages, setup

setup(
    name="mc-options",
    version="0.1.0",
    description="Monte Carlo European option pricer cross-checked against Black-Scholes",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.23",
        "pandas>=1.5",
        "scipy>=1.10",
    ],
    extras_require={
        "numba": ["numba>=0.57"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "mcoptions=mcoptions.reporting.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    include_package_data=True,
)
