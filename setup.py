from setuptools import find_packages, setup


def main():
    version = "1.0.0"
    packages = find_packages(include=["tbcpay", "tbcpay.*"])
    install_requires = [
        "aiohttp>=3.8.5,<3.14",
        "pydantic>=2",
        "ruamel.yaml>=0.17.21",
    ]
    extras_require = {
        "test": [
            "aioresponses>=0.7.4",
            "cryptography>=41.0.2",
            "pytest>=7.4.0",
        ],
    }

    setup(name="tbcpay",
          version=version,
          description="Client for the TBC bank card processing gateway",
          license="Apache 2.0",
          packages=packages,
          python_requires=">=3.9",
          install_requires=install_requires,
          extras_require=extras_require,
          )


if __name__ == "__main__":
    main()
