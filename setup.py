"""
Setup configuration for admachin package.
"""

from setuptools import setup, find_packages

setup(
    name="admachin",
    version="1.0.0",
    description="Ad creative combination builder for Facebook/Instagram campaigns",
    packages=find_packages(include=["admachin", "admachin.*"]),
    python_requires=">=3.9",
    install_requires=[
        "supabase>=2.5.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0.0",
        "click>=8.1",
        "streamlit>=1.36",
        "logfire>=0.40",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "admachin=admachin.cli.main:cli",
        ],
    },
)
