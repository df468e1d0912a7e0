from setuptools import find_packages, setup

setup(
    name="timeline",
    version="0.1",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    package_data={"timeline": ["static/*.html"]},
    python_requires=">=3.11",
    install_requires=[
        "aiohttp>=3.9.0",
        "aiosqlite>=0.19.0",
        "aiofiles>=23.2.1",
        "pydantic>=2.5.0",
        "pydantic-core>=2.14.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "pytest-aiohttp>=1.0.5",
            "ruff>=0.1.9",
        ],
    },
    entry_points={
        "console_scripts": ["timeline=timeline.main:main"],
    },
)
