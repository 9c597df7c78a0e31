from setuptools import setup, find_packages

setup(
    name="gpu-mem-for-llm",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "python-dotenv>=1.0.0",  # for environment variables
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",  # for testing
            "pytest-cov>=4.1.0",  # for test coverage
        ],
    },
    author="gpu-mem-for-llm contributors",
    description="Estimate the GPU memory required to serve a large language model",
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "gpu-mem-for-llm=gpu_mem_for_llm.cli:main",
        ],
    },
)
