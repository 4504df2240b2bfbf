"""Publication assembly.

Copies a declarative ``PublicationInfo`` into the publishing host: registers
the publication, resolves its coordinates, attaches the component and the
javadoc/sources jars, and fills in the POM.
"""

from .publication_models import DeveloperInfo, PublicationInfo, ScmInfo, SNAPSHOT_SUFFIX
from .publishing import (
    MavenPom, MavenPublication, PomDeveloper, PomLicense, PomScm, Project,
)


class PublicationConfigError(ValueError):
    """A publication descriptor is missing something required."""


def resolve_version(version: str, is_snapshot: bool) -> str:
    """Append ``-SNAPSHOT`` for snapshot publications (never twice)."""
    if is_snapshot and not version.endswith(SNAPSHOT_SUFFIX):
        return version + SNAPSHOT_SUFFIX
    return version


def assemble_publication(descriptor: PublicationInfo, project: Project) -> MavenPublication:
    """Register and populate a Maven publication on ``project``.

    groupId and version fall back to the project defaults. The artifactId
    comes from the descriptor, then from its POM info. The component and the
    javadoc/sources archive tasks are looked up by name and skipped when the
    project does not have them.

    Args:
        descriptor: The publication description.
        project: Host project receiving the publication.

    Returns:
        The registered publication.

    Raises:
        PublicationConfigError: If groupId, artifactId or version cannot be
            resolved. Nothing is registered in that case.
    """
    group_id = descriptor.group_id or project.group
    artifact_id = descriptor.artifact_id or descriptor.pom.artifact_id
    version = descriptor.version or project.version

    if not artifact_id:
        raise PublicationConfigError(
            f"Publication '{descriptor.name}' has no artifactId")
    if not group_id:
        raise PublicationConfigError(
            f"Publication '{descriptor.name}' has no groupId and project "
            f"'{project.name}' defines no group")
    if not version:
        raise PublicationConfigError(
            f"Publication '{descriptor.name}' has no version and project "
            f"'{project.name}' defines no version")

    publication = project.publishing.create(descriptor.name)
    publication.group_id = group_id
    publication.artifact_id = artifact_id
    publication.version = resolve_version(version, descriptor.is_snapshot)

    component = project.find_component(descriptor.component)
    if component is not None:
        publication.from_component(component)

    for task_name in (descriptor.javadoc.javadoc_task, descriptor.javadoc.source_task):
        if task_name is None:
            continue
        task = project.find_task(task_name)
        if task is not None:
            publication.artifact(task)

    configure_pom(publication.pom, descriptor)
    return publication


def configure_pom(pom: MavenPom, descriptor: PublicationInfo):
    """Copy POM fields, licenses, developers and SCM info into ``pom``.

    Licenses and developers are emitted one per entry, in order, without
    deduplication.
    """
    info = descriptor.pom
    pom.url = info.artifact_url
    pom.name = descriptor.name
    if info.description is not None:
        pom.description = info.description

    for item in info.licenses:
        pom.licenses.append(PomLicense(name=item.name, url=item.url))

    for item in info.developers:
        pom.developers.append(configure_developer(item))

    if info.scm is None:
        return
    scm = info.scm
    if not scm.url.strip():
        # Blank URL: fall back to the artifact URL, keeping the branch only.
        scm = ScmInfo(url=info.artifact_url, branch=scm.branch)
    pom.scm = PomScm(
        url=scm.valid_url(),
        connection=scm.valid_connection(),
        developer_connection=scm.valid_connection(ssh=True),
    )


def configure_developer(info: DeveloperInfo) -> PomDeveloper:
    """Build a POM developer entry; unset optional fields stay ``None``."""
    return PomDeveloper(
        id=info.id,
        name=info.name,
        email=info.email,
        organization=info.organization,
        organization_url=info.organization_url,
        roles=list(info.roles) if info.roles else [],
        timezone=info.timezone,
        url=info.url,
    )
