"""Scan orchestration: config, zones, engine and walker wired together."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .config import StandardsConfig, load_config
from .engine import RuleEngine, describe_error
from .project import ProjectAnalyzer, ProjectInfo, Zone, detect_project_type
from .result import ScanResult, Violation, ZoneResult
from .severity import Category
from .utils.code import iter_code_files, iter_directories, load_gitignore_patterns
from .utils.fileio import read_source_file
from .validators import validate_component_entry_files, validate_directories

logger = logging.getLogger(__name__)


@dataclass
class ScanOptions:
    root: Path
    zones: Sequence[str] = ()
    config_path: Optional[Path] = None
    skip_structure: bool = False
    skip_naming: bool = False
    skip_content: bool = False

    @property
    def skipped_categories(self) -> Tuple[Category, ...]:
        flags = (
            (self.skip_structure, Category.STRUCTURE),
            (self.skip_naming, Category.NAMING),
            (self.skip_content, Category.CONTENT),
        )
        return tuple(category for skipped, category in flags if skipped)


@dataclass
class ScanOutcome:
    """What a scan produced, plus the context the reporter needs."""

    result: ScanResult
    project: ProjectInfo
    config: StandardsConfig
    zone_errors: Dict[str, List[Violation]] = field(default_factory=dict)


def select_zones(project: ProjectInfo, requested: Sequence[str]) -> List[Zone]:
    """Zones named on the command line win over detected ones."""

    if not requested:
        return list(project.zones)
    zones: List[Zone] = []
    for name in requested:
        zone = project.zone(name)
        if zone is None:
            path = project.root / name
            if not path.is_dir():
                logger.warning("Zone %s does not exist, skipping", name)
                continue
            zone = Zone(name=name, path=path, type=detect_project_type(path))
        zones.append(zone)
    return zones


async def _read_entry_files(files: Sequence[Path]) -> List[Tuple[str, str]]:
    entries: List[Tuple[str, str]] = []
    for path in files:
        if path.name != "index.tsx":
            continue
        try:
            entries.append((str(path), await asyncio.to_thread(read_source_file, path)))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, describe_error(exc))
    return entries


async def scan_zone(
    zone: Zone,
    config: StandardsConfig,
    root: Path,
    ignore_patterns: Sequence[str],
    structure_pass: bool = True,
    gitignore: Sequence[str] = (),
) -> ZoneResult:
    """Validate every file of one zone with a fresh engine."""

    engine = RuleEngine.for_zone(config, zone.name)
    files = list(iter_code_files(zone.path, config.extensions, ignore_patterns, gitignore, root))
    logger.info("Scanning zone %s (%d files)", zone.name, len(files))

    semaphore = asyncio.Semaphore(config.concurrency)

    async def validate(path: Path) -> List[Violation]:
        async with semaphore:
            return await engine.validate_file(str(path))

    per_file = await asyncio.gather(*(validate(path) for path in files))
    violations = [violation for found in per_file for violation in found]

    if structure_pass:
        directories = list(iter_directories(zone.path, ignore_patterns, gitignore, root))
        violations.extend(validate_directories(root, directories))
        violations.extend(validate_component_entry_files(await _read_entry_files(files)))

    return ZoneResult(zone=zone.name, files_processed=len(files), violations=violations)


async def run_scan(options: ScanOptions) -> ScanOutcome:
    """Run a full scan. Raises ``ConfigError`` for an unusable configuration."""

    started = time.perf_counter()
    root = options.root.resolve()
    config = load_config(root, options.config_path).skip_categories(options.skipped_categories)
    project = ProjectAnalyzer(root).analyze(config.zones)
    zones = select_zones(project, options.zones)
    gitignore = tuple(load_gitignore_patterns(root))

    logger.info(
        "Project type: %s, monorepo: %s, zones: %s",
        project.type,
        "yes" if project.is_monorepo else "no",
        ", ".join(zone.name for zone in zones) or "none",
    )

    result = ScanResult()
    for zone in zones:
        zone_result = await scan_zone(
            zone,
            config,
            root,
            config.ignore_patterns,
            structure_pass=not options.skip_structure,
            gitignore=gitignore,
        )
        result.add_zone(zone_result)

    result.processing_time_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "Scan finished: %d files, %d errors, %d warnings in %.0f ms",
        result.total_files,
        result.total_errors,
        result.total_warnings,
        result.processing_time_ms,
    )
    return ScanOutcome(
        result=result,
        project=project,
        config=config,
        zone_errors=result.zone_violations(),
    )
