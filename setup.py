from setuptools import setup, find_packages

setup(
    name="departure_board",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.2.0",
        "python-dateutil>=2.8.1",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "departure-board=departure_board.cli:main",
        ],
    },
    description="Airport departures display with passenger alerts and airfare calculation",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
)
