"""Tests for publication_assembler.py — copying descriptors into publications."""

import dataclasses

import pytest

from buildconf.publication_assembler import (
    PublicationConfigError,
    assemble_publication,
    resolve_version,
)
from buildconf.publication_models import (
    DeveloperInfo, JavadocTasks, LicenseInfo, PomInfo, PublicationInfo, ScmInfo,
)
from buildconf.publishing import Project


class TestCoordinates:
    def test_project_defaults(self, java_project, release_publication):
        pub = assemble_publication(release_publication, java_project)
        assert pub.group_id == "com.github.ushiosan23"
        assert pub.artifact_id == "jvm-utilities"
        assert pub.version == "1.0.0"
        assert java_project.publishing.publications["jvm-utilities"] is pub

    def test_descriptor_overrides_project(self, java_project, release_publication):
        info = dataclasses.replace(release_publication, group_id="io.example", version="2.0.0")
        pub = assemble_publication(info, java_project)
        assert pub.group_id == "io.example"
        assert pub.version == "2.0.0"

    def test_snapshot_suffix(self, java_project, release_publication):
        info = dataclasses.replace(release_publication, version="1.2.3", is_snapshot=True)
        assert assemble_publication(info, java_project).version == "1.2.3-SNAPSHOT"

    def test_snapshot_suffix_not_doubled(self):
        assert resolve_version("1.2.3-SNAPSHOT", True) == "1.2.3-SNAPSHOT"
        assert resolve_version("1.2.3", False) == "1.2.3"

    def test_artifact_id_from_pom(self, java_project):
        info = PublicationInfo(
            name="release",
            pom=PomInfo(artifact_url="https://example.com", artifact_id="from-pom"),
        )
        assert assemble_publication(info, java_project).artifact_id == "from-pom"

    def test_missing_artifact_id_fails(self, java_project):
        info = PublicationInfo(name="release", pom=PomInfo(artifact_url="https://example.com"))
        with pytest.raises(PublicationConfigError, match="artifactId"):
            assemble_publication(info, java_project)
        assert len(java_project.publishing.publications) == 0

    def test_missing_version_fails(self, release_publication):
        project = Project(name="bare", group="com.example")
        with pytest.raises(PublicationConfigError, match="version"):
            assemble_publication(release_publication, project)

    def test_duplicate_publication_name(self, java_project, release_publication):
        assemble_publication(release_publication, java_project)
        with pytest.raises(ValueError, match="already registered"):
            assemble_publication(release_publication, java_project)


class TestAttachments:
    def test_component_and_jars_attached(self, java_project, release_publication):
        pub = assemble_publication(release_publication, java_project)
        assert pub.component.name == "java"
        assert [t.classifier for t in pub.artifacts] == ["javadoc", "sources"]

    def test_missing_component_and_tasks_skipped(self, release_publication):
        project = Project(name="bare", group="com.example", version="1.0.0")
        pub = assemble_publication(release_publication, project)
        assert pub.component is None
        assert pub.artifacts == []

    def test_disabled_tasks_not_looked_up(self, java_project, release_publication):
        info = dataclasses.replace(release_publication,
                                   javadoc=JavadocTasks(javadoc_task=None, source_task="java-jar-sources"))
        pub = assemble_publication(info, java_project)
        assert [t.name for t in pub.artifacts] == ["java-jar-sources"]


class TestPom:
    def test_basic_fields(self, java_project, release_publication):
        pom = assemble_publication(release_publication, java_project).pom
        assert pom.url == "https://github.com/Ushiosan23/jvm_libs"
        assert pom.name == "jvm-utilities"
        assert pom.description == "Utilities for the java virtual machine."

    def test_licenses_and_developers_in_order(self, java_project):
        info = PublicationInfo(
            name="release",
            artifact_id="demo",
            pom=PomInfo(
                artifact_url="https://example.com",
                licenses=(LicenseInfo(), LicenseInfo(name="Apache-2.0", url="https://apache.org"), LicenseInfo()),
                developers=(DeveloperInfo(id="b"), DeveloperInfo(id="a", roles=("owner",))),
            ),
        )
        pom = assemble_publication(info, java_project).pom
        assert [l.name for l in pom.licenses] == ["MIT", "Apache-2.0", "MIT"]
        assert [d.id for d in pom.developers] == ["b", "a"]
        assert pom.developers[0].roles == []
        assert pom.developers[1].roles == ["owner"]
        assert pom.developers[0].email is None

    def test_empty_lists(self, java_project):
        info = PublicationInfo(name="release", artifact_id="demo",
                               pom=PomInfo(artifact_url="https://example.com"))
        pom = assemble_publication(info, java_project).pom
        assert pom.licenses == []
        assert pom.developers == []
        assert pom.description is None
        assert pom.scm is None

    def test_scm_block(self, java_project, release_publication):
        scm = assemble_publication(release_publication, java_project).pom.scm
        assert scm.url == "https://github.com/Ushiosan23/jvm_libs/tree/main"
        assert scm.connection == "scm:git:github.com/Ushiosan23/jvm_libs.git"
        assert scm.developer_connection == "scm:git:ssh:github.com/Ushiosan23/jvm_libs.git"

    def test_blank_scm_url_uses_artifact_url(self, java_project):
        info = PublicationInfo(
            name="release",
            artifact_id="demo",
            pom=PomInfo(artifact_url="https://example.com/demo.git", scm=ScmInfo(url="  ", branch="dev")),
        )
        scm = assemble_publication(info, java_project).pom.scm
        assert scm.url == "https://example.com/demo/tree/dev"
        assert scm.connection == "scm:git:example.com/demo.git"
