"""Shared test fixtures for the buildconf test suite."""

import textwrap
from pathlib import Path

import pytest

from buildconf.publication_models import (
    DeveloperInfo, LicenseInfo, PomInfo, PublicationInfo, ScmInfo,
)
from buildconf.publishing import Project


@pytest.fixture
def write_file(tmp_path):
    """Factory fixture that writes a dedented text file into tmp_path and returns its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def java_project():
    """A host project with a java component and javadoc/sources jar tasks."""
    project = Project(name="jvm-utilities", group="com.github.ushiosan23", version="1.0.0")
    project.add_component("java")
    project.add_task("java-jar-javadoc", "javadoc")
    project.add_task("java-jar-sources", "sources")
    return project


@pytest.fixture
def release_publication():
    """A complete release descriptor with one license, one developer and SCM info."""
    return PublicationInfo(
        name="jvm-utilities",
        artifact_id="jvm-utilities",
        pom=PomInfo(
            artifact_url="https://github.com/Ushiosan23/jvm_libs",
            description="Utilities for the java virtual machine.",
            licenses=(LicenseInfo(url="https://github.com/Ushiosan23/jvm_libs/blob/main/LICENSE.md"),),
            developers=(
                DeveloperInfo(
                    id="Ushiosan23",
                    name="Brian Alvarez",
                    email="haloleyendee@outlook.com",
                    roles=("developer", "owner"),
                    url="https://github.com/Ushiosan23",
                ),
            ),
            scm=ScmInfo(url="https://github.com/Ushiosan23/jvm_libs.git"),
        ),
    )


@pytest.fixture
def library_properties(write_file):
    """A root gradle.properties describing the 'utilities' library."""
    return write_file("gradle.properties", """\
        global.maven.groupId=com.github.ushiosan23
        utilities.version=1.0.0
        utilities.maven.artifact=jvm-utilities
        utilities.maven.url=https://github.com/Ushiosan23/jvm_libs
        utilities.maven.description=Utilities for the java virtual machine.
        utilities.maven.license=MIT
        utilities.maven.licenseUrl=https://opensource.org/licenses/MIT
        utilities.maven.developers=Ushiosan23
        utilities.maven.developer.Ushiosan23.name=Brian Alvarez
        utilities.maven.developer.Ushiosan23.email=haloleyendee@outlook.com
        utilities.maven.developer.Ushiosan23.roles=developer, owner
        utilities.scm.url=https://github.com/Ushiosan23/jvm_libs.git
    """)
