"""
Build orchestration - one stylesheet per output target.

Each target is aggregated and rendered on its own, so a malformed record
in one target never leaks into another.

Usage:
    from tokensheet.build import BuildTarget, build_all
    from tokensheet.config import BuildConfig

    result = build_all(
        [BuildTarget("button.scss", button_records)],
        BuildConfig(build_path="build/"),
    )
    if not result.ok:
        for destination, error in result.failures.items():
            print(destination, error)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .aggregator import RecordLike, aggregate
from .config import BuildConfig
from .exceptions import BuildError, TokensheetError
from .renderer import render

logger = logging.getLogger(__name__)


@dataclass
class BuildTarget:
    """A destination file and the records that belong in it."""

    destination: str
    records: Sequence[RecordLike] = field(default_factory=list)


@dataclass
class BuildResult:
    """Outcome of build_all."""

    written: list[Path] = field(default_factory=list)
    failures: dict[str, TokensheetError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def build_stylesheet(records: Iterable[RecordLike], config: Optional[BuildConfig] = None) -> str:
    """
    Aggregate and render records into stylesheet text.

    Args:
        records: Resolved token records for a single target
        config: Build configuration (strict mode and render format)

    Returns:
        Rendered stylesheet text
    """
    config = config or BuildConfig()
    groups = aggregate(records, strict=config.strict)
    return render(groups, config.render)


def write_stylesheet(
    records: Iterable[RecordLike],
    destination: str,
    config: Optional[BuildConfig] = None,
) -> Path:
    """
    Build a stylesheet and write it under the build path.

    The text is fully rendered before the file is opened, so a failed
    aggregation leaves no file behind.

    Returns:
        Path of the written file

    Raises:
        AggregationError: Records are malformed or conflicting
        BuildError: The file could not be written
    """
    config = config or BuildConfig()
    text = build_stylesheet(records, config)
    path = config.destination_path(destination)

    # Destination only ever holds a complete stylesheet
    tmp_path = path.with_name(f"{path.name}.tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        tmp_path.replace(path)
    except OSError as e:
        tmp_path.unlink(missing_ok=True)
        raise BuildError(str(path), f"{type(e).__name__}: {e}") from e

    logger.info(f"Wrote {path}")
    return path


def build_all(targets: Iterable[BuildTarget], config: Optional[BuildConfig] = None) -> BuildResult:
    """
    Build every target independently.

    A failing target is recorded in the result and the remaining
    targets are still built.
    """
    config = config or BuildConfig()
    result = BuildResult()

    for target in targets:
        try:
            path = write_stylesheet(target.records, target.destination, config)
        except TokensheetError as e:
            logger.error(f"Build failed for {target.destination}: {e}")
            result.failures[target.destination] = e
            continue
        result.written.append(path)

    return result
