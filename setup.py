from setuptools import setup, find_packages

setup(
    name="terminal_minesweeper",
    version="0.1",
    packages=find_packages(include=["backend", "backend.*", "tui", "tui.*"]),
    package_data={"tui": ["config.yaml"]},
    install_requires=[
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minesweeper=tui.app:main"
        ]
    },
)
