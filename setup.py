from setuptools import setup, find_namespace_packages

setup(
    name="bookstore_console",
    version="0.1.0",
    packages=find_namespace_packages(include=['bookstore*', 'bookstore_cli*']),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
    ],
    extras_require={
        "mssql": ["pyodbc"],  # Only needed for SQL Server connections
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "bookstore=bookstore_cli.main:main",
        ],
    },
)
