"""Setup configuration for fibcursor."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="fibcursor",
    version="0.1.0",
    author="Luther",
    description="Shared Fibonacci sequence cursor served over HTTP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "fastapi>=0.100",
        "uvicorn>=0.22",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "httpx>=0.24",
        ],
    },
    entry_points={
        "console_scripts": [
            "fibcursor=fibcursor.__main__:main",
        ],
    },
)
