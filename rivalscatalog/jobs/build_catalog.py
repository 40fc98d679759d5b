"""
Build the card catalog.

Run this job to validate the source tables and export the assembled
catalog as JSON. Exits non-zero when a strict build is refused.
"""

import argparse
import logging
import sys
from pathlib import Path

from rivalscatalog.config import BuildPolicy, settings
from rivalscatalog.models.errors import CatalogBuildError
from rivalscatalog.models.report import BuildReport
from rivalscatalog.parsers.source_tables import load_source_tables
from rivalscatalog.services.catalog_builder import build_catalog
from rivalscatalog.services.catalog_export import build_report, write_catalog

logger = logging.getLogger(__name__)


def run_build(
    source_dir: Path,
    output_path: Path | None = None,
    policy: BuildPolicy | str = BuildPolicy.STRICT,
    allow_missing: bool = False,
) -> BuildReport:
    """
    Load the source tables, build the catalog and optionally export it.

    Args:
        source_dir: Directory holding the six source table files
        output_path: Where to write the catalog JSON. None skips the export.
        policy: Build policy (strict or lenient)
        allow_missing: Treat missing source files as empty tables

    Returns:
        BuildReport describing the catalog

    Raises:
        CatalogBuildError: If a strict build is refused
    """
    logger.info("Building catalog from %s...", source_dir)

    tables = load_source_tables(source_dir, allow_missing=allow_missing)
    catalog = build_catalog(tables, policy=policy)

    if output_path is not None:
        path = write_catalog(catalog, output_path)
        logger.info("Wrote %d cards to %s", len(catalog), path)

    return build_report(catalog, policy)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Build the card catalog")
    parser.add_argument(
        "--source-dir",
        type=Path,
        default=settings.source_dir,
        help=f"Directory with the source tables (default: {settings.source_dir})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.export_path,
        help=f"Catalog JSON output path (default: {settings.export_path})",
    )
    parser.add_argument(
        "--policy",
        default=settings.build_policy.value,
        choices=[p.value for p in BuildPolicy],
        help="strict refuses the build on any bad card, lenient skips it",
    )
    parser.add_argument(
        "--allow-missing",
        action="store_true",
        help="Treat missing source table files as empty",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate only, do not write the catalog",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        report = run_build(
            args.source_dir,
            output_path=None if args.check else args.output,
            policy=args.policy,
            allow_missing=args.allow_missing,
        )
    except CatalogBuildError as e:
        for error in e.errors:
            logger.error("%s", error)
        logger.error("Catalog build refused: %d invalid card(s)", len(e.errors))
        return 1

    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
