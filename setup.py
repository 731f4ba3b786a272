"""Setup configuration for the SES mail forwarder."""

from setuptools import find_packages, setup

setup(
    name="ses-mail-forwarder",
    version="0.1.0",
    packages=find_packages(include=["src", "src.*"]),
    package_dir={"": "."},
    python_requires=">=3.9",
    install_requires=["boto3", "botocore"],
    extras_require={"test": ["pytest"]},
)
