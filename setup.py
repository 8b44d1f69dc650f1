from setuptools import setup, find_packages

version = "1.0.0"
setup(
    name="pynewebpaylogistics",
    version=version,
    keywords=[
        "newebpay",
        "logistics",
    ],
    description="NewebPay logistics API client",
    long_description="",
    license="MIT Licence",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    platforms="any",
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "loguru",
        "pycryptodome",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
