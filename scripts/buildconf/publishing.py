"""In-memory model of the publishing host.

Mutable counterparts of what a build tool exposes to publication code: a
project with named components and archive tasks, a publishing extension
that registers Maven publications, and a signing extension.
"""

import base64
import binascii
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SoftwareComponent:
    """A named software component (e.g. ``java``) that can be published."""
    name: str


@dataclass
class ArchiveTask:
    """A named build task producing a jar, e.g. the javadoc or sources jar.

    Attributes:
        name: Task name.
        classifier: Archive classifier (``javadoc``, ``sources``).
    """
    name: str
    classifier: Optional[str] = None


@dataclass
class PomLicense:
    name: Optional[str] = None
    url: Optional[str] = None


@dataclass
class PomDeveloper:
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None
    organization_url: Optional[str] = None
    roles: list = field(default_factory=list)
    timezone: Optional[str] = None
    url: Optional[str] = None


@dataclass
class PomScm:
    url: Optional[str] = None
    connection: Optional[str] = None
    developer_connection: Optional[str] = None


@dataclass
class MavenPom:
    """POM builder state for one publication."""
    url: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    licenses: list = field(default_factory=list)
    developers: list = field(default_factory=list)
    scm: Optional[PomScm] = None


@dataclass
class MavenPublication:
    """A registered Maven publication.

    Attributes:
        name: Publication name.
        group_id: Resolved groupId.
        artifact_id: Resolved artifactId.
        version: Resolved version, including any ``-SNAPSHOT`` suffix.
        component: Attached software component, if any.
        artifacts: Attached archive tasks, in attach order.
        pom: POM metadata.
    """
    name: str
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    component: Optional[SoftwareComponent] = None
    artifacts: list = field(default_factory=list)
    pom: MavenPom = field(default_factory=MavenPom)

    def from_component(self, component: SoftwareComponent):
        self.component = component

    def artifact(self, task: ArchiveTask):
        self.artifacts.append(task)


class PublishingExtension:
    """Registry of Maven publications, in registration order."""

    def __init__(self):
        self.publications = OrderedDict()

    def create(self, name: str) -> MavenPublication:
        """Register a new, empty publication.

        Raises:
            ValueError: If a publication with ``name`` already exists.
        """
        if name in self.publications:
            raise ValueError(f"Publication '{name}' is already registered")
        publication = MavenPublication(name=name)
        self.publications[name] = publication
        return publication


class SigningExtension:
    """In-memory PGP key configuration and the list of signed publications."""

    def __init__(self):
        self.key_id: Optional[str] = None
        self.key_b64: Optional[str] = None
        self.password: Optional[str] = None
        self.signed = []

    def use_in_memory_pgp_keys(self, key_id: str, key_b64: str, password: str):
        self.key_id = key_id
        self.key_b64 = key_b64
        self.password = password

    def key_material(self) -> bytes:
        """Decode the configured base64 key.

        Raises:
            ValueError: If no key is configured or it is not valid base64.
        """
        if not self.key_b64:
            raise ValueError("No in-memory signing key configured")
        try:
            return base64.b64decode(self.key_b64, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Signing key is not valid base64: {e}") from e

    def sign(self, *publications: MavenPublication):
        for publication in publications:
            if publication not in self.signed:
                self.signed.append(publication)


class Project:
    """A build project as seen by publication code.

    Args:
        name: Project name.
        group: Default groupId for publications.
        version: Default version for publications.
        components: Software components by name.
        tasks: Archive tasks by name.
    """

    def __init__(self, name: str, group: Optional[str] = None, version: Optional[str] = None,
                 components: Optional[dict] = None, tasks: Optional[dict] = None):
        self.name = name
        self.group = group
        self.version = version
        self.components = dict(components or {})
        self.tasks = dict(tasks or {})
        self.publishing = PublishingExtension()
        self.signing = SigningExtension()

    def add_component(self, name: str) -> SoftwareComponent:
        component = SoftwareComponent(name)
        self.components[name] = component
        return component

    def add_task(self, name: str, classifier: Optional[str] = None) -> ArchiveTask:
        task = ArchiveTask(name, classifier)
        self.tasks[name] = task
        return task

    def find_component(self, name: str) -> Optional[SoftwareComponent]:
        return self.components.get(name)

    def find_task(self, name: str) -> Optional[ArchiveTask]:
        return self.tasks.get(name)
