from setuptools import setup, find_packages

setup(
    name="leakscan",
    version="1.0.0",
    description="Line-oriented secret and sensitive data scanner",
    python_requires=">=3.8",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0",
        "rich>=13.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
        "google-re2>=1.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "leakscan=leakscan.cli.main:cli",
        ],
    },
)
