from setuptools import setup, find_packages

setup(
    name="catr",
    version="0.1.0",
    description="Concatenate files to standard output, optionally numbering lines",
    packages=find_packages(include=["catr", "catr.*"]),
    install_requires=[
        "typer",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "catr=catr.cli:app",
        ],
    },
    python_requires=">=3.11",
)
