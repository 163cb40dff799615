#!/usr/bin/env python3
"""
CSS Class Curator
Main entry point: maps the classes of one stylesheet build onto another.
"""

import logging
import re
from pathlib import Path

import click

from comparator.report_builder import ReportBuilder
from core.curator import ClassCurator
from core.errors import CuratorError
from core.settings import CLASS_PATTERN, COMPLEXITY_CEILING, DISTANCE_THRESHOLD, MatchSettings


@click.command()
@click.argument("stylesheet_a", type=click.Path(path_type=Path))
@click.argument("stylesheet_b", type=click.Path(path_type=Path))
@click.option("--out", "out_dir", type=click.Path(file_okay=False, path_type=Path), default=Path("out"),
              show_default=True, help="Directory for the output artifacts.")
@click.option("--threshold", type=float, default=DISTANCE_THRESHOLD, show_default=True,
              help="Matches must have a distance strictly below this value.")
@click.option("--ceiling", type=int, default=COMPLEXITY_CEILING, show_default=True,
              help="Maximum selector pairings enumerated per class pair.")
@click.option("--class-pattern", default=CLASS_PATTERN, show_default=True,
              help="Regular expression matching class names in selectors.")
@click.option("--epsilon-compat", is_flag=True,
              help="Compare against threshold minus machine epsilon.")
@click.option("--html-report", is_flag=True, help="Also write report.html.")
@click.option("-v", "--verbose", is_flag=True, help="Log progress.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
def main(stylesheet_a: Path, stylesheet_b: Path, out_dir: Path, threshold: float, ceiling: int,
         class_pattern: str, epsilon_compat: bool, html_report: bool, verbose: bool, quiet: bool) -> None:
    """Match the classes of STYLESHEET_A to the classes of STYLESHEET_B."""
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = MatchSettings(
        distance_threshold=threshold,
        complexity_ceiling=ceiling,
        class_pattern=class_pattern,
        epsilon_compat=epsilon_compat,
    )
    try:
        settings.compiled_pattern()
    except re.error as e:
        raise click.BadParameter(str(e), param_hint="--class-pattern") from e

    curator = ClassCurator(settings)
    try:
        result = curator.curate_files(stylesheet_a, stylesheet_b)
    except CuratorError as e:
        raise click.ClickException(str(e)) from e

    builder = ReportBuilder(out_dir)
    paths = builder.generate_json_report(result)
    if html_report:
        paths['html'] = builder.generate_html_report(result, settings.cutoff)

    click.echo(f"Matched {len(result.pairs)} of {len(result.classes_a)} classes; "
               f"results in {paths['pairs'].parent}")


if __name__ == "__main__":
    main()
