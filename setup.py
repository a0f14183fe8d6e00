from setuptools import setup, find_packages

setup(
    name="shape-assistant",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*"]),  # ai_adapter, board, shape_api
    py_modules=["constants"],
    include_package_data=True,
    install_requires=[
        "fastapi>=0.95.0",
        "uvicorn[standard]>=0.22.0",
        "python-dotenv>=1.1.1",
        "httpx>=0.24.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": ["pytest", "httpx"],  # for testing
    },
)
