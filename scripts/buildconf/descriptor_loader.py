"""Build publication descriptors from flat properties.

Libraries can be described entirely in a root ``.properties`` file using
keys under a per-library prefix, e.g. for prefix ``utilities``::

    global.maven.groupId=com.github.ushiosan23
    utilities.version=1.0.0
    utilities.maven.artifact=jvm-utilities
    utilities.maven.url=https://github.com/Ushiosan23/jvm_libs
    utilities.maven.description=Utilities for the java virtual machine.
    utilities.maven.license=MIT
    utilities.maven.licenseUrl=https://opensource.org/licenses/MIT
    utilities.maven.developers=Ushiosan23
    utilities.maven.developer.Ushiosan23.name=Brian Alvarez
    utilities.maven.developer.Ushiosan23.roles=developer,owner
    utilities.scm.url=https://github.com/Ushiosan23/jvm_libs.git
"""

from typing import Optional

from .property_cache import PropertyOverlayCache
from .publication_assembler import PublicationConfigError
from .publication_models import (
    DEFAULT_BRANCH, DeveloperInfo, LicenseInfo, PomInfo, PublicationInfo, ScmInfo,
)

GROUP_ID_KEY = "global.maven.groupId"

# Property suffix → DeveloperInfo field.
DEVELOPER_FIELDS = {
    "name": "name",
    "email": "email",
    "organization": "organization",
    "organizationUrl": "organization_url",
    "timezone": "timezone",
    "url": "url",
}


def _split_list(value: Optional[str]) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def developers_from_properties(cache: PropertyOverlayCache, prefix: str) -> tuple:
    """Read the developers listed in ``<prefix>.maven.developers``."""
    developers = []
    for dev_id in _split_list(cache.lookup(f"{prefix}.maven.developers")):
        base = f"{prefix}.maven.developer.{dev_id}"
        fields = {
            attr: cache.lookup(f"{base}.{suffix}")
            for suffix, attr in DEVELOPER_FIELDS.items()
        }
        roles = _split_list(cache.lookup(f"{base}.roles"))
        developers.append(DeveloperInfo(id=dev_id, roles=tuple(roles) or None, **fields))
    return tuple(developers)


def licenses_from_properties(cache: PropertyOverlayCache, prefix: str) -> tuple:
    """Read the single license declared by ``.maven.license``/``.maven.licenseUrl``."""
    name = cache.lookup(f"{prefix}.maven.license")
    url = cache.lookup(f"{prefix}.maven.licenseUrl")
    if name is None and url is None:
        return ()
    default = LicenseInfo()
    return (LicenseInfo(name=name or default.name, url=url or default.url),)


def scm_from_properties(cache: PropertyOverlayCache, prefix: str) -> ScmInfo:
    return ScmInfo(
        url=cache.lookup(f"{prefix}.scm.url", ""),
        branch=cache.lookup(f"{prefix}.scm.branch", DEFAULT_BRANCH),
        connection=cache.lookup(f"{prefix}.scm.connection"),
        developer_connection=cache.lookup(f"{prefix}.scm.sshConnection"),
    )


def publication_from_properties(
    cache: PropertyOverlayCache,
    prefix: str,
    name: str = "release",
    is_snapshot: bool = False,
) -> PublicationInfo:
    """Build a ``PublicationInfo`` from the ``<prefix>.*`` properties.

    Args:
        cache: Property source.
        prefix: Per-library key prefix (e.g. ``utilities``).
        name: Publication name to register.
        is_snapshot: Mark the publication as a snapshot.

    Returns:
        The publication descriptor. groupId and version are left ``None`` when
        their keys are absent so the project defaults apply.

    Raises:
        PublicationConfigError: If ``<prefix>.maven.url`` is not set.
    """
    artifact_url = cache.lookup(f"{prefix}.maven.url")
    if not artifact_url:
        raise PublicationConfigError(f"Missing required property '{prefix}.maven.url'")

    artifact_id = cache.lookup(f"{prefix}.maven.artifact")
    pom = PomInfo(
        artifact_url=artifact_url,
        artifact_id=artifact_id,
        description=cache.lookup(f"{prefix}.maven.description"),
        licenses=licenses_from_properties(cache, prefix),
        developers=developers_from_properties(cache, prefix),
        scm=scm_from_properties(cache, prefix),
    )
    return PublicationInfo(
        name=name,
        pom=pom,
        is_snapshot=is_snapshot,
        group_id=cache.lookup(GROUP_ID_KEY),
        artifact_id=artifact_id,
        version=cache.lookup(f"{prefix}.version"),
    )
