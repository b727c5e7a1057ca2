# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.3.0",
    description="A small Lisp-family interpreter with HTTP and JSON natives",
    python_requires=">=3.10",
    packages=find_packages(include=["risp", "risp.*", "risp_lsp", "risp_lsp.*"]),
    package_data={"risp": ["prelude/*.risp"]},
    install_requires=[
        "requests>=2.28",
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "risp=risp.__main__:main",
            "risp-ls=risp_lsp.server:main",
        ],
    },
    zip_safe=False,
)
