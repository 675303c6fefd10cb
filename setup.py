from setuptools import setup, find_packages

setup(
    name="textopts",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "structlog",
        "python-dotenv",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "textopts=textopts.core.cli:main",
        ],
    },
    description="Option store and tokenizer for space-delimited name=value strings.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
