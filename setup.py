# Setup script
from setuptools import setup, find_packages

setup(
    name="knn-iot",
    version="0.1.0",
    description="Brute-force K-Nearest-Neighbors classifier for small, memory-resident datasets",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "python-dotenv>=1.1.1",
        "numpy>=1.24.3",
        "pandas>=2.0.3",
        "scikit-learn>=1.3.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.3",
            "black>=23.9.1",
            "flake8>=6.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "knn-iot=knn_iot.main:main",
        ],
    },
)
