import setuptools
import sys
import os
import re


if sys.version_info < (3, 7):
    sys.exit('Sorry, Python < 3.7 is not supported')

with open("README.md", "r") as fh:
    long_description = fh.read()

# Read metadata from metadata file
with open(os.path.join(os.path.dirname(__file__), 'replicate_client', '_metadata.py')) as metadata_fh:
    metadata_file = metadata_fh.read()
metadata = dict(re.findall("__([a-z]+)__ = '([^']+)'", metadata_file))


def read_requirements(fi: str):
    def proc_req(r):
        r = r.strip()
        if len(r) == 0 or any(map(lambda x: r.startswith(x), ["#", ".", "-"])):
            return None
        return r

    with open(fi, "rt") as rt:
        lines = rt.read().splitlines()
    return list(filter(None, map(proc_req, lines)))


requires = read_requirements("requirements.txt")
test_requires = read_requirements("requirements-test.txt")

setuptools.setup(
    name="replicate-client",
    version=metadata['version'],
    description="Python client library for the Replicate machine learning inference API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=requires,
    extras_require={"test": test_requires},
    entry_points={
        "console_scripts": ["replicate-client=cli.main:rc"],
    },
    python_requires=">=3.7",
)
