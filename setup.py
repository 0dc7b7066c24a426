import setuptools

# Built-time dependencies are listed in pyproject.toml
# [build-system]

setuptools.setup(
    name="fractalpaint",
    version="1.0.0",
    description=(
        "Progressive, cancellable rendering of escape-time sets and "
        "strange attractors"
    ),
    license="MIT",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "numba",
        "Pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
