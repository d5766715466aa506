"""Setup script for Code Meet Hub."""
from setuptools import setup, find_packages

setup(
    name="code-meet-hub",
    version="1.0.0",
    description="Community tech-event listing: event feed, sign-in and validated event submission",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "sqlalchemy>=2.0",
        "requests>=2.31",
        "streamlit>=1.32",
        "pandas>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "httpx>=0.25",
        ],
    },
)
