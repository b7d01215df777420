from setuptools import setup, find_packages

setup(
    name="bounded_heap",
    version="0.1.0",
    packages=find_packages(),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "jaxtyping",
    ],
    extras_require={
        "test": [
            "psutil",
            "pytest",
        ],
    },
    zip_safe=False,
)
