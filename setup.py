from setuptools import find_packages, setup

about: dict = {}
with open("src/ledgerkeys/__about__.py") as f:
    exec(f.read(), about)

if __name__ == "__main__":
    setup(
        name="ledgerkeys",
        version=about["__version__"],
        description="Ed25519 key material, StrKey encoding and cached signature verification",
        python_requires=">=3.9",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=[
            "PyNaCl>=1.5",
            "python-dotenv>=1.0",
        ],
        extras_require={"test": ["pytest>=7"]},
        entry_points={"console_scripts": ["ledgerkeys=ledgerkeys.cli:main"]},
    )
