"""fabletime Package setup file."""
# Third Party Imports
import setuptools

setuptools.setup(
    name="fabletime",
    description="Fantasy calendar times with configurable hours and locale-aware formatting",
    version="1.0.0",
    packages=setuptools.find_packages("src"),
    package_dir={"": "src"},
    package_data={
        "": [
            "common/default_behavior.config",
        ],
    },
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.19",
        "sqlalchemy>=1.4",
    ],
    extras_require={
        "dev": [
            # Linting
            "ruff==0.1.1",
            "pylint==3.0.0",
            # Type Checking
            "mypy==1.6.0",
            # Formatters
            "black==23.9.1",
            "isort[colors]==5.12.0",
            # Pre-commit stuff
            "pre-commit==3.5.0",
        ],
        "test": [
            "pytest>=7.4.2",
            "pytest-randomly>=3.15.0",
            "coverage[toml]>=7.3.2",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fabletime=fabletime:main",
        ]
    },
    zip_safe=False,
)
