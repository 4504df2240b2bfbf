"""Render an assembled publication as a Maven ``pom.xml`` document."""

import xml.etree.ElementTree as ET
from typing import Optional

from .publishing import MavenPublication, PomDeveloper

POM_NS = "http://maven.apache.org/POM/4.0.0"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
POM_XSD = "https://maven.apache.org/xsd/maven-4.0.0.xsd"


def _add(parent: ET.Element, tag: str, text: Optional[str]) -> Optional[ET.Element]:
    """Append ``<tag>text</tag>`` unless ``text`` is ``None``."""
    if text is None:
        return None
    el = ET.SubElement(parent, tag)
    el.text = text
    return el


def _developer_element(parent: ET.Element, dev: PomDeveloper):
    el = ET.SubElement(parent, "developer")
    _add(el, "id", dev.id)
    _add(el, "name", dev.name)
    _add(el, "email", dev.email)
    _add(el, "url", dev.url)
    _add(el, "organization", dev.organization)
    _add(el, "organizationUrl", dev.organization_url)
    if dev.roles:
        roles_el = ET.SubElement(el, "roles")
        for role in dev.roles:
            _add(roles_el, "role", role)
    _add(el, "timezone", dev.timezone)


def render_pom(publication: MavenPublication) -> str:
    """Render the publication coordinates and POM metadata as XML.

    Empty license and developer lists still produce their (empty) container
    elements. The ``<scm>`` block is omitted when no SCM info was assembled.

    Args:
        publication: An assembled publication.

    Returns:
        The complete ``pom.xml`` content, ending with a newline.
    """
    root = ET.Element("project", {
        "xmlns": POM_NS,
        "xmlns:xsi": XSI_NS,
        "xsi:schemaLocation": f"{POM_NS} {POM_XSD}",
    })
    _add(root, "modelVersion", "4.0.0")
    _add(root, "groupId", publication.group_id)
    _add(root, "artifactId", publication.artifact_id)
    _add(root, "version", publication.version)

    pom = publication.pom
    _add(root, "name", pom.name)
    _add(root, "description", pom.description)
    _add(root, "url", pom.url)

    licenses_el = ET.SubElement(root, "licenses")
    for lic in pom.licenses:
        lic_el = ET.SubElement(licenses_el, "license")
        _add(lic_el, "name", lic.name)
        _add(lic_el, "url", lic.url)

    developers_el = ET.SubElement(root, "developers")
    for dev in pom.developers:
        _developer_element(developers_el, dev)

    if pom.scm is not None:
        scm_el = ET.SubElement(root, "scm")
        _add(scm_el, "connection", pom.scm.connection)
        _add(scm_el, "developerConnection", pom.scm.developer_connection)
        _add(scm_el, "url", pom.scm.url)

    ET.indent(root, space="    ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def pom_file_name(publication: MavenPublication) -> str:
    """Conventional repository file name: ``<artifactId>-<version>.pom``."""
    return f"{publication.artifact_id}-{publication.version}.pom"
