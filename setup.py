from setuptools import setup, find_packages

setup(
    name="backupbuddy",
    version="0.1.0",
    description="BackupBuddy runs named backup jobs one after the other - archiving, encrypting and rotating packages per trigger.",
    author="Dominik Püllen",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "backupbuddy=backupbuddy.main:main",
        ],
    },
    python_requires=">=3.9",
)
