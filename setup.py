from setuptools import setup

setup(
    name="grafos",
    version="0.1.0",
    description="Directed graphs printed as adjacency lists and matrices",
    license="MIT",
    packages=["grafos"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=5.1", "pyuca>=1.2"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["grafos = grafos.cli:main"]},
)
