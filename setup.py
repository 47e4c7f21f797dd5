from setuptools import setup, find_packages

setup(
    name="nuget-template-packages",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pytz",
        "typer",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pytest-cov",
            "pytest-mock",
            "mypy",
            "black",
            "types-pytz",
        ],
    },
    entry_points={
        "console_scripts": [
            "nuget-template-packages=nuget_template_packages.cli.main_cli:app",
        ],
    },
    description="Metadata records and download contract for template packages installed from NuGet",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
