from setuptools import find_namespace_packages, setup

setup(
    name="pystreamguide",
    version="0.1.0",
    description="A terminal channel guide and player for live streams",
    packages=find_namespace_packages(include=("pystreamguide", "pystreamguide.*")),
    python_requires=">=3.11",
    install_requires=[
        "requests",
        "prompt-toolkit",
        "rich",
        "python-dotenv",
    ],
    extras_require={
        "dev": [
            "black",
            "pytest",
            "isort",
        ]
    },
    entry_points={
        "console_scripts": [
            "pystreamguide=pystreamguide.main:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
