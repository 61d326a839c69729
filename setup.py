from setuptools import find_packages, setup

setup(
    name="linkres",
    version="0.1.0",
    description="Hyperlink resolution engine for BI dashboard link descriptors",
    packages=find_packages(include=["linkres", "linkres.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Descriptor, session and config models
        "typer",  # CLI
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linkresc=linkres.cli:main",
        ],
    },
)
