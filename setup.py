"""
Teamspace - Team entity service

Team (tenant workspace) model, routing, preferences, sign-in allow-list and
first-collection provisioning for the document collaboration platform.
"""

from setuptools import setup, find_packages

setup(
    name="teamspace-service",
    version="1.0.0",
    description="Teamspace - Team entity service",
    author="Teamspace",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"teamspace": ["onboarding/*.md", "migrations/versions/*.py"]},
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        # Database
        "sqlalchemy[asyncio]>=2.0.23",
        "asyncpg>=0.29.0",
        "psycopg2-binary>=2.9.9",

        # Database migrations
        "alembic>=1.13.0",

        # Configuration and value validation
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",

        # Background task queue
        "redis>=5.0.1",

        # Monitoring and observability
        "sentry-sdk>=1.39.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "aiosqlite>=0.19.0",
            "black>=23.10.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
        "License :: Other/Proprietary License",
    ],
)
