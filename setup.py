from setuptools import setup, find_packages

setup(
    name="resolvent",
    version="0.1.0",
    description="Resolution refutation prover for flat first-order logic",
    author="resolvent contributors",
    author_email="",

    # Find packages in the src/ directory
    packages=find_packages(where="src"),
    package_dir={"": "src"},

    zip_safe=False,
    python_requires=">=3.8",

    install_requires=[
        "networkx",
        "pyyaml",
        "tqdm",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "mypy",
            "types-PyYAML",
            "ruff",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "resolvent=resolvent.cli.prove:main",
        ],
    },
)
