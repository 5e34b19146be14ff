# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="fsancestor",
    version="1.0.0",
    description="Lowest common ancestor lookup for filesystem-like trees",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["fsancestor*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests",  # Remote tree manifests
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'fsancestor=fsancestor.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
