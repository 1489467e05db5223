"""Setuptools configuration for the lab website."""

from pathlib import Path

from setuptools import find_packages, setup


ROOT = Path(__file__).resolve().parent


def read_requirements(relative_path: str):
    """Read dependency lines from a requirements file."""

    requirements_path = ROOT / relative_path
    if not requirements_path.exists():
        return []

    requirements = []
    for line in requirements_path.read_text(encoding="utf-8").splitlines():
        item = line.strip()
        if not item or item.startswith("#"):
            continue
        requirements.append(item)
    return requirements


setup(
    name="lab-site",
    version="0.1.0",
    description="Academic lab website rendered from a JSON data document",
    long_description=(ROOT / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["lab_site", "lab_site.*"]),
    include_package_data=True,
    package_data={
        "lab_site": [
            "templates/*.html",
            "static/*.js",
            "*.json",
        ]
    },
    install_requires=read_requirements("requirements.txt"),
    extras_require={"test": read_requirements("requirements-test.txt")},
    python_requires=">=3.10",
)
