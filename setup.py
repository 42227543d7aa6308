from setuptools import setup, find_packages

setup(
    name="crdpmap",
    version="0.1.0",
    description="crdpmap - CRDP event/command mapping typings generator",
    author="crdpmap developers",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.16.0",
        "rich>=13.7.1",
        "pydantic>=2.5",
        "PyYAML>=6.0.2",
        "python-dotenv>=1.0.1",
        "tree-sitter>=0.22.0",
        "tree-sitter-typescript>=0.21.0",
    ],
    extras_require={
        "test": ["pytest>=8.3.2"],
    },
    entry_points={
        "console_scripts": [
            "crdpmap=crdpmap.apps.cli.app:main_entry",
        ],
    },
)
