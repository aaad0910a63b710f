# setup.py
from setuptools import find_packages, setup

setup(
    name="fire-gear-tracker",
    version="0.1.0",
    description="Equipment inventory and inspection scheduling API for fire departments",
    packages=find_packages(include=["firegear", "firegear.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn[standard]>=0.29",
        "SQLAlchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "psycopg[binary]>=3.1",
        "alembic>=1.13",
        "pydantic[email]>=2.6",
        "pydantic-settings>=2.2",
        "python-dateutil>=2.9",
        "python-dotenv>=1.0",  # .env support for pydantic-settings
        "structlog>=24.1",
        "sentry-sdk>=1.45",
        "slowapi>=0.1.9",
        "limits>=3.10",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "aiosqlite>=0.20",
        ],
    },
)
