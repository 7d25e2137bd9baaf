# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="filereq",
    version="0.1.0",
    description="Nested AND/OR file-presence requirements with global duplicate detection",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["filereq", "filereq.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
