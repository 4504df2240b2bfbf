"""Publication data model classes.

Pure data structures describing a Maven publication as build configuration
code declares it. No behavior beyond derived SCM values, and no imports from
other buildconf modules.
"""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_BRANCH = "main"
SNAPSHOT_SUFFIX = "-SNAPSHOT"


@dataclass(frozen=True)
class LicenseInfo:
    """A POM ``<license>`` entry.

    Attributes:
        name: License name (e.g. ``MIT``).
        url: Link to the license text.
    """
    name: str = "MIT"
    url: str = "https://opensource.org/licenses/MIT"


@dataclass(frozen=True)
class DeveloperInfo:
    """A POM ``<developer>`` entry.

    Only ``id`` is required; every other field is copied to the POM when set.

    Attributes:
        id: Unique developer identifier (usually a forge username).
        name: Full name.
        email: Contact email.
        organization: Organization name.
        organization_url: Organization website.
        roles: Role names (e.g. ``developer``, ``owner``).
        timezone: Timezone id or offset.
        url: Personal website.
    """
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    organization: Optional[str] = None
    organization_url: Optional[str] = None
    roles: Optional[tuple] = None
    timezone: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class ScmInfo:
    """Version control information for the POM ``<scm>`` block.

    Attributes:
        url: Repository URL. A blank value means "use the POM artifact URL".
        branch: Branch used for the browsable ``/tree/<branch>`` link.
        connection: Explicit read-only connection string, used verbatim.
        developer_connection: Explicit read-write connection string.
    """
    url: str = ""
    branch: str = DEFAULT_BRANCH
    connection: Optional[str] = None
    developer_connection: Optional[str] = None

    def valid_url(self) -> str:
        """Browsable repository URL for ``branch``.

        At most one trailing ``.git`` or ``/`` is removed before appending
        ``/tree/<branch>``.
        """
        base = self.url
        for suffix in (".git", "/"):
            if base.endswith(suffix):
                base = base[:-len(suffix)]
                break
        return f"{base}/tree/{self.branch}"

    def valid_connection(self, ssh: bool = False) -> str:
        """Maven SCM connection string (``scm:git:...``).

        An explicit connection short-circuits the computation. With ``ssh``
        the explicit ``developer_connection`` is preferred.

        Args:
            ssh: Produce the ``scm:git:ssh:`` developer form.

        Returns:
            The connection string.
        """
        if ssh and self.developer_connection is not None:
            return self.developer_connection
        if self.connection is not None:
            return self.connection

        result = self.url
        for scheme in ("http://", "https://"):
            if result.startswith(scheme):
                result = result[len(scheme):]
                break
        if not result.endswith(".git"):
            result += ".git"
        return ("scm:git:ssh:" if ssh else "scm:git:") + result


@dataclass(frozen=True)
class PomInfo:
    """POM metadata attached to a publication.

    Attributes:
        artifact_url: Project home page; also the SCM fallback URL.
        artifact_id: Artifact id used when the publication itself has none.
        description: ``<description>`` text.
        licenses: Licenses in POM order.
        developers: Developers in POM order.
        scm: SCM information, or ``None`` to omit the ``<scm>`` block.
    """
    artifact_url: str
    artifact_id: Optional[str] = None
    description: Optional[str] = None
    licenses: tuple = ()
    developers: tuple = ()
    scm: Optional[ScmInfo] = None


@dataclass(frozen=True)
class JavadocTasks:
    """Names of the archive tasks that produce the javadoc and sources jars.

    Either name may be ``None`` to skip that artifact.
    """
    javadoc_task: Optional[str] = "java-jar-javadoc"
    source_task: Optional[str] = "java-jar-sources"


@dataclass(frozen=True)
class PublicationInfo:
    """Declarative description of one Maven publication.

    Attributes:
        name: Publication name registered with the publishing host.
        pom: POM metadata.
        is_snapshot: Append ``-SNAPSHOT`` to the resolved version.
        group_id: groupId, or ``None`` to use the project group.
        artifact_id: artifactId, or ``None`` to use ``pom.artifact_id``.
        version: Version, or ``None`` to use the project version.
        component: Name of the software component to publish.
        javadoc: Javadoc/sources archive task names.
    """
    name: str
    pom: PomInfo
    is_snapshot: bool = False
    group_id: Optional[str] = None
    artifact_id: Optional[str] = None
    version: Optional[str] = None
    component: str = "java"
    javadoc: JavadocTasks = field(default_factory=JavadocTasks)


@dataclass(frozen=True)
class SigningInfo:
    """In-memory PGP signing material.

    Attributes:
        key_id: Short key id.
        password: Key passphrase.
        pgp_key_b64: ASCII-armored secret key, base64 encoded.
    """
    key_id: str
    password: str
    pgp_key_b64: str

    @property
    def is_complete(self) -> bool:
        return bool(self.key_id and self.pgp_key_b64)
