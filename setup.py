
from setuptools import setup, find_packages
setup(
    name="prefix_shard",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "zstandard>=0.15"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["prefix-shard = prefix_shard.cli:main"]},
    python_requires=">=3.10",
)
