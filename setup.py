from setuptools import setup, find_packages

setup(
    name="kruskal_mst",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "networkx>=3.2",
        "numpy>=1.26",
        "tqdm",
        "psutil"
    ],
    extras_require={
        "test": [
            "pytest"
        ]
    },
    entry_points={
        'console_scripts': [
            'kruskal-mst=kruskal_mst.cli:main',
        ],
    },
    author="",
    author_email="",
    description="Minimum spanning trees with Kruskal's algorithm and a union-find forest",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    python_requires=">=3.9",
)
