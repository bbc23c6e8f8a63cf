from setuptools import setup

setup(
    name = "scriptasm",
    author = "Chuck \"Sarchar\"",
    author_email = "chuck@borboggle.com",
    url = "https://github.com/sarchar/pyspv",
    license = "MIT",
    classifiers = [
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Assemblers",
        "Topic :: Security :: Cryptography",
    ],
    description = "Bitcoin script assembler and hex transaction/block decoding in Python",
    packages = ["scriptasm"],
    python_requires = ">=3.6",
    extras_require = {
        "test": ["pytest"],
    },
    version = '0.0.1',
    long_description = open('README.md').read(),
    long_description_content_type = "text/markdown",
)
