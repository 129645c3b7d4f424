import re
from pathlib import Path

from setuptools import setup

install_requires = [
    "multidict>=4.5,<7.0",
    "yarl>=1.0,<2.0",
    "prometheus-client>=0.12,<1.0",
]

extras_require = {
    "aiohttp": ["aiohttp>=3.9,<4.0"],
    "httpx": ["httpx>=0.23,<1.0"],
    "test": [
        "aiohttp>=3.9,<4.0",
        "httpx>=0.23,<1.0",
        "pytest>=7.0",
        "pytest-aiohttp>=1.0",
        "pytest-httpbin>=2.0",
    ],
}


def read(*parts):
    return Path(__file__).resolve().parent.joinpath(*parts).read_text().strip()


def read_version():
    regexp = re.compile(r"^__version__\W*=\W*\"([\d.abrc]+)\"")
    for line in read("aio_network", "__init__.py").splitlines():
        match = regexp.match(line)
        if match is not None:
            return match.group(1)
    else:
        raise RuntimeError("Cannot find version in aio_network/__init__.py")


setup(
    name="aio-network",
    version=read_version(),
    description="Performs a request through an injected transport and validates the response status",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    platforms=["macOS", "POSIX", "Windows"],
    python_requires=">=3.11",
    project_urls={},
    license="MIT",
    packages=["aio_network"],
    package_dir={"aio_network": "./aio_network"},
    package_data={"aio_network": ["py.typed"]},
    install_requires=install_requires,
    extras_require=extras_require,
    include_package_data=True,
)
