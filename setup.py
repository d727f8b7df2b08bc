from setuptools import setup, find_packages

setup(
    name="dockcli",
    version="0.1.0",
    description="Interactively start and stop compose services as docker containers",
    python_requires=">=3.8",
    license="Apache-2.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "pyyaml>=6.0",
        "click>=8.0",
        "docker>=6.0",
        "requests>=2.26",
        "questionary>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dockcli=dockcli.CLI.main:main",
        ],
    },
)
