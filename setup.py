from setuptools import setup, find_packages

setup(
    name="minesweeper_engine",
    version="0.1",
    packages=find_packages(include=["engine", "engine.*", "server", "server.*"]),
    python_requires=">=3.9",
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minesweeper-server=server.app:main"
        ]
    },
)
