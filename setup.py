from setuptools import setup, find_packages

setup(
    name="codeintel-commits",
    version="0.1.0",
    description="Deterministic shard hashing and commit graph helpers for code intelligence indexes",

    package_dir={"": "src"},
    packages=find_packages(where="src"),

    install_requires=[
        "pydantic>=2.0.0",
        "click>=8.2.0",
        "pyyaml>=6.0",
        "prometheus-client>=0.16.0",
        "structlog>=23.1.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.3.0",
            "pytest-cov>=4.0.0",
            "black>=23.3.0",
            "mypy>=1.3.0",
            "ruff>=0.0.270",
        ],
    },

    entry_points={
        "console_scripts": [
            "codeintel=codeintel.cli.main:cli",
        ],
    },

    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.11",
    ],
)
