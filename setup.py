from setuptools import find_packages, setup

setup(
    name="linkheader",
    version="0.1.0",
    description="Parse HTTP Link headers (RFC 8288) with RFC 8187 extended values",
    author="William Wieselquist",
    packages=find_packages(include=["linkheader", "linkheader.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Parser configuration models
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
            "lizard",  # Cyclomatic complexity
            "rich",  # Terminal formatting for scripts/
            "types-setuptools",  # Type stubs
        ],
    },
)
