import os
import shutil

from setuptools import setup, find_packages

# Create ispn dir if does not exists
ispn_dir = os.path.expanduser(os.path.join("~", ".opencitations", "ispn"))
if not os.path.exists(ispn_dir):
    os.makedirs(os.path.join(ispn_dir, "logs"))

# If configuration file does not exists, copy the default one
config_file = os.path.join(ispn_dir, "config.ini")
if not os.path.exists(config_file) and os.path.exists("config.ini"):
    shutil.copy(os.path.join(".", "config.ini"), config_file)

python_source_dir = os.path.join("ispn", "python", "src")
with open("README.md", "r") as f:
    long_description = f.read()

setup(
    name="oc-ispn",
    version="1.0.0",
    description="Validation of International Standard Product Numbers "
    "(ISBN, ISSN, ISMN, EAN/UCC and SSCC)",
    author="OpenCitations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author_email="tech@opencitations.net",
    python_requires=">=3.7",
    package_dir={"oc.ispn": python_source_dir},
    install_requires=[
        "pandas",
        "tqdm",
    ],
    extras_require={"test": ["pytest"]},
    packages=["oc.ispn"]
    + [f"oc.ispn.{mod}" for mod in find_packages(where=python_source_dir)],
)
