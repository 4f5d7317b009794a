import setuptools

# The numerical kernels are compiled at run-time by numba (no C extension
# to build).

setuptools.setup(
    name="fractalview",
    version="0.1.0",
    description="Interactive explorer of the Mandelbrot set",
    license="MIT",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src"),
    install_requires=[
        "numpy",
        "numba",
        "PyQt6",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
