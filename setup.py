from setuptools import setup, find_packages

setup(
    name="movies_api",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"app": ["data/*.json"]},
    include_package_data=True,
    install_requires=[
        "pydantic>=2",
        "uvicorn",
        "fastapi",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx>=0.27.0",
        ],
    },
    python_requires='>=3.11',
)
