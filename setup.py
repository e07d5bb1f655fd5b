from setuptools import setup, find_namespace_packages

setup(
    name="levelmask",
    version="0.1.0a0",
    description="Severity masks for log gating — chainable range modifiers and a tiny directive language",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["levelmask*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov>=4.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Logging",
    ],
    python_requires=">=3.10",
)
