from setuptools import setup, find_packages

setup(
    name="console-command-processor",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "structlog>=23.1",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio>=0.21",
        ],
    },
    author="Console Command Processor Developers",
    description="Interactive command-line session engine with validated, prompted command parameters.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
