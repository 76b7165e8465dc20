from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="flowparam",
    version="0.1.0",
    description="Lock-step variable tables for repeated flow execution.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests",)),
    package_data={"flowparam.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["jsonschema"],
    extras_require={"test": ["pytest", "pyyaml"]},
)
