from setuptools import find_packages, setup

package_name = "gridsearch"


def read_requirements():
    with open("requirements.txt", "r") as file:
        return [
            line.strip() for line in file if line.strip() and not line.startswith("#")
        ]


setup(
    name=package_name,
    version="0.0.1",
    packages=find_packages(
        exclude=["tests", "tests.*", "examples"]
    ),  # Exclude tests and subpackages
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.10",
    zip_safe=True,
    description="Exploration order and paths of A*, Dijkstra, BFS and DFS on a 2D grid",
    license="MIT",
    tests_require=["pytest"],
    entry_points={
        "console_scripts": ["gridsearch=gridsearch.main:app"],
    },
)
