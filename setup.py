from setuptools import setup, find_packages

setup(
    name="propatlas",
    version="0.1.0",
    description="Resolution prover for propositional logic",
    author="propatlas Contributors",
    author_email="",

    package_dir={"": "src"},
    packages=find_packages(where="src"),

    zip_safe=False,
    python_requires=">=3.8",

    install_requires=[
        "lark",
        "networkx",
        "numpy",
        "tqdm",
        "python-dotenv",
        "pyyaml",
    ],

    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],

    entry_points={
        "console_scripts": [
            "propatlas-prove=propatlas.cli.prove:main",
            "propatlas-bench=propatlas.cli.bench:main",
        ],
    },
)
