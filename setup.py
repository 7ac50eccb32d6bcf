from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="slice-object",
    version="0.1.0",
    description="The slice value type of a dynamic-language object model, with exact and overflow-safe index normalization.",
    packages=["slice_object", "slice_object._src"],
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
