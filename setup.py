#!/usr/bin/env python3
"""
Setup script for sheet-to-json package
"""

from setuptools import setup, find_packages

setup(
    name="sheet-to-json",
    version="0.1.0",
    description="Convert xlsx / CSV / Google Sheets tables into keyed records",
    packages=find_packages(include=["sheet_to_json", "sheet_to_json.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 📋 Data Validation
        "pydantic>=2.5.0",

        # 🌐 HTTP (Google Sheets API)
        "httpx>=0.25.2",

        # 📊 Spreadsheet
        "openpyxl>=3.1.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.21",
        ],
    },
    package_data={
        "sheet_to_json": ["py.typed"],
    },
)
