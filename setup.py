from setuptools import setup, find_packages

setup(
    name="bayeswalk",
    version="0.1.0",
    description="Random-walk Metropolis sampling and chain diagnostics for teaching Bayesian inference",
    packages=find_packages(include=["bayeswalk", "bayeswalk.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
