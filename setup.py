from setuptools import setup, find_packages

setup(
    name="platformtester",
    version="0.1.0",
    description="Walkable surface and jump reachability analysis for 2.5-D platformer scenes",
    python_requires=">=3.8",
    packages=find_packages(include=["platformtester", "platformtester.*"]),
    install_requires=[
        "numpy",
        "pygame",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "platformtester-report=platformtester.surface_report:main",
        ],
    },
    zip_safe=False,
)
