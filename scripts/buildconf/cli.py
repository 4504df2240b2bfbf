"""CLI entry point: property lookups and POM generation.

Wires together the property cache, descriptor loading, publication assembly,
signing and POM rendering.
"""

import argparse
import sys
from pathlib import Path
from typing import Mapping, Optional

from .descriptor_loader import GROUP_ID_KEY, publication_from_properties
from .pom_writer import pom_file_name, render_pom
from .property_cache import PropertyOverlayCache
from .publication_assembler import PublicationConfigError, assemble_publication
from .publishing import MavenPublication, Project
from .signing import nexus_credentials, sign_publications, signing_info_from


def _require_dir(project_path: Path):
    if not project_path.is_dir():
        print(f"ERROR: Project directory not found: {project_path}", file=sys.stderr)
        sys.exit(1)


def lookup_value(project_path: Path, key: str, default: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Resolve a single key against the project's property files and environment."""
    _require_dir(project_path)
    cache = PropertyOverlayCache(project_path, environ)
    return cache.lookup(key, default)


def generate_pom(
    project_path: Path,
    prefix: str,
    name: str = "release",
    snapshot: bool = False,
    output_path: Optional[Path] = None,
    dry_run: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> MavenPublication:
    """Assemble the ``<prefix>`` publication and print or write its POM.

    The host project gets its group from ``global.maven.groupId``, its version
    from ``<prefix>.version`` and a ``java`` component. The publication is
    signed when valid signing keys are available, and missing OSSRH staging
    credentials are reported.

    Args:
        project_path: Root project directory holding the property files.
        prefix: Per-library property prefix.
        name: Publication name.
        snapshot: Publish as a ``-SNAPSHOT`` version.
        output_path: Directory to write the POM to. Defaults to ``project_path``.
        dry_run: If ``True``, print the POM instead of writing it.
        environ: Environment overlay; defaults to ``os.environ``.

    Returns:
        The assembled publication.

    Raises:
        PublicationConfigError: If the descriptor is incomplete.
    """
    _require_dir(project_path)
    cache = PropertyOverlayCache(project_path, environ)
    descriptor = publication_from_properties(cache, prefix, name=name, is_snapshot=snapshot)

    project = Project(
        name=project_path.resolve().name,
        group=cache.lookup(GROUP_ID_KEY),
        version=cache.lookup(f"{prefix}.version"),
    )
    project.add_component("java")
    publication = assemble_publication(descriptor, project)
    signed = sign_publications(project.signing, signing_info_from(cache),
                               project.publishing.publications.values())
    staging = dict(zip(("OSSRH_PROFILE_ID", "OSSRH_USERNAME", "OSSRH_PASSWORD"),
                       nexus_credentials(cache)))
    missing = [key for key, value in staging.items() if not value]
    if missing:
        print(f"WARNING: Staging credentials missing ({', '.join(missing)}), "
              f"publication cannot be uploaded", file=sys.stderr)

    content = render_pom(publication)
    file_name = pom_file_name(publication)
    if dry_run:
        print("=" * 60)
        print(file_name)
        print("=" * 60)
        print(content)
    else:
        out = output_path or project_path
        _write(out / file_name, content)
        if signed:
            print(f"  ✓ signing configured for key {project.signing.key_id}")
        if not missing:
            print(f"  ✓ staging profile {staging['OSSRH_PROFILE_ID']} as {staging['OSSRH_USERNAME']}")
    return publication


def _write(path: Path, content: str):
    """Write content to a file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    print(f"  ✓ {path}")


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="buildconf",
        description="Resolve build properties and generate Maven publication metadata",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    get = sub.add_parser("get", help="Print a property resolved from files and environment")
    get.add_argument("project", type=Path, help="Root project directory")
    get.add_argument("key", help="Property key")
    get.add_argument("--default", "-d", default=None, help="Value used when the key is absent")

    pom = sub.add_parser("pom", help="Assemble a publication and emit its pom.xml")
    pom.add_argument("project", type=Path, help="Root project directory")
    pom.add_argument("prefix", help="Property prefix of the library (e.g. 'utilities')")
    pom.add_argument("--name", default="release", help="Publication name (default: release)")
    pom.add_argument("--snapshot", "-s", action="store_true", help="Publish a -SNAPSHOT version")
    pom.add_argument("--output", "-o", type=Path, default=None,
                     help="Output directory (default: project dir)")
    pom.add_argument("--dry-run", "-n", action="store_true", help="Print output without writing files")
    return parser.parse_args(argv)


def main(argv=None):
    """CLI entry point. Parses arguments and dispatches the subcommand."""
    args = parse_args(argv)

    if args.command == "get":
        value = lookup_value(args.project, args.key, args.default)
        if value is None:
            print(f"ERROR: Property '{args.key}' is not defined", file=sys.stderr)
            sys.exit(1)
        print(value)
        return

    try:
        generate_pom(args.project, args.prefix, name=args.name, snapshot=args.snapshot,
                     output_path=args.output, dry_run=args.dry_run)
    except PublicationConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
