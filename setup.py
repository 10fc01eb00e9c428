import os

from setuptools import find_packages, setup


def read(fname):
    with open(os.path.join(os.path.dirname(__file__), fname)) as fin:
        return fin.read()


def get_version():
    version = os.getenv("RELEASE_VERSION", None)
    if version is not None:
        return version
    return "0.1.0"


version = get_version()


INSTALL_REQUIRES = [
    "python-json-logger>=0.1.11, <3.0.0",
    "python-dotenv>=0.19.2, <=1.0.1",
    "varname>=0.8.1, <1.0.0",
    "starlette<=0.47.3",
    "fastapi>=0.103.1, <=0.119.1",
    "jinja2>=3.0.3, <4.0.0",
    "jsonpatch>=1.32, <2.0",
    "MarkupSafe>=2.1.1, <3.0.0",
    "beautifulsoup4",
]


setup(
    name="formkit",
    version=version,
    description="Form widgets with server-side state synchronization.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["formkit", "formkit.*"]),
    package_data={
        "": [
            "*.html",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    install_requires=INSTALL_REQUIRES,
    extras_require={
        "apps": [
            "uvicorn[standard]>=0.18.2, <1.0.0",
            "websockets>=10.3, <=13.1",
        ],
        "tests": [
            "pytest",
            "mock",
            "httpx",
        ],
    },
)
