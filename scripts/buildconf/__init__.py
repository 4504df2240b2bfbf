"""Build configuration helpers: property overlay cache and Maven publication assembly."""

from .cli import main
from .property_cache import PropertyOverlayCache, parse_properties
from .publication_assembler import PublicationConfigError, assemble_publication
from .publication_models import (
    DeveloperInfo, JavadocTasks, LicenseInfo, PomInfo, PublicationInfo, ScmInfo, SigningInfo,
)

__all__ = [
    "main", "PropertyOverlayCache", "parse_properties", "PublicationConfigError",
    "assemble_publication", "DeveloperInfo", "JavadocTasks", "LicenseInfo", "PomInfo",
    "PublicationInfo", "ScmInfo", "SigningInfo",
]
