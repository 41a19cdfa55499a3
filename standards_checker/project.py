"""Project type and zone detection."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .config import ZoneSettings
from .utils.fileio import read_json_file

logger = logging.getLogger(__name__)

MONOREPO_MARKERS = ("packages", "apps", "lerna.json", "turbo.json", "nx.json", "rush.json")
STANDARD_ZONE_DIRS = ("apps", "libs", "projects")
FRAMEWORK_DEPENDENCIES = (
    ("next", "next"),
    ("react", "react"),
    ("@angular/core", "angular"),
    ("vue", "vue"),
)
ROOT_ZONE = "."


@dataclass(frozen=True)
class Zone:
    name: str
    path: Path
    type: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "path": str(self.path), "type": self.type}


@dataclass
class ProjectInfo:
    root: Path
    type: str
    is_monorepo: bool
    zones: List[Zone] = field(default_factory=list)

    def zone(self, name: str) -> Optional[Zone]:
        for zone in self.zones:
            if zone.name == name:
                return zone
        return None


def _package_json(path: Path) -> Optional[Dict[str, Any]]:
    data = read_json_file(path / "package.json")
    if data is not None and not isinstance(data, dict):
        logger.warning("Ignoring package.json in %s: not an object", path)
        return None
    return data


def detect_project_type(path: Path) -> str:
    """Classify ``path`` as next, react, angular, vue, node or generic."""

    package = _package_json(path)
    if package is not None:
        dependencies = {**(package.get("devDependencies") or {}), **(package.get("dependencies") or {})}
        for dependency, project_type in FRAMEWORK_DEPENDENCIES:
            if dependency in dependencies:
                return project_type
        if package.get("main") or package.get("exports"):
            return "node"

    if (path / "pages").exists() or (path / "app").exists():
        return "next"
    if (path / "package.json").exists() and (path / "src").exists():
        return "node"
    return "generic"


def is_monorepo(root: Path) -> bool:
    if any((root / marker).exists() for marker in MONOREPO_MARKERS):
        return True
    package = _package_json(root)
    return bool(package and package.get("workspaces"))


class ProjectAnalyzer:
    """Work out which zones of a project should be scanned."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def analyze(self, settings: Optional[ZoneSettings] = None) -> ProjectInfo:
        settings = settings or ZoneSettings()
        info = ProjectInfo(
            root=self.root,
            type=detect_project_type(self.root),
            is_monorepo=is_monorepo(self.root),
        )

        if info.is_monorepo:
            zones = self.monorepo_zones(settings)
        elif settings.custom_zones:
            zones = self.custom_zones(settings.custom_zones)
        else:
            zones = [Zone(name=ROOT_ZONE, path=self.root, type=info.type)]

        if settings.only_zone:
            zones = self.restrict(zones, settings.only_zone)
        info.zones = _unique(zones)
        logger.debug(
            "Project %s: type=%s monorepo=%s zones=%s",
            self.root,
            info.type,
            info.is_monorepo,
            [zone.name for zone in info.zones],
        )
        return info

    def monorepo_zones(self, settings: ZoneSettings) -> List[Zone]:
        zones: List[Zone] = []
        standard = list(STANDARD_ZONE_DIRS)
        if settings.include_packages:
            standard.append("packages")
        for name in standard:
            zones.extend(self.zone_directory(name))
        zones.extend(self.workspace_zones())
        zones.extend(self.custom_zones(settings.custom_zones))
        return zones

    def restrict(self, zones: List[Zone], only_zone: str) -> List[Zone]:
        """Keep ``only_zone`` and the zones below it; fall back to the directory itself."""

        prefix = only_zone.rstrip("/")
        kept = [zone for zone in zones if zone.name == prefix or zone.name.startswith(prefix + "/")]
        if kept:
            return kept
        return self.custom_zones([prefix])

    def zone_directory(self, name: str) -> List[Zone]:
        """Every sub-directory of ``root/name`` becomes a zone."""

        candidate = self.root / name
        if not candidate.is_dir():
            return []
        return [self._zone(child) for child in sorted(candidate.iterdir()) if child.is_dir()]

    def custom_zones(self, names: Iterable[str]) -> List[Zone]:
        zones = []
        for name in names:
            path = self.root / name
            if path.is_dir():
                zones.append(Zone(name=name, path=path, type=detect_project_type(path)))
            else:
                logger.warning("Custom zone %s does not exist", name)
        return zones

    def workspace_zones(self) -> List[Zone]:
        package = _package_json(self.root)
        if not package:
            return []
        workspaces = package.get("workspaces")
        if isinstance(workspaces, dict):
            workspaces = workspaces.get("packages")
        if not isinstance(workspaces, list):
            return []

        zones: List[Zone] = []
        for pattern in workspaces:
            pattern = str(pattern)
            if "*" in pattern or "?" in pattern:
                matches = sorted(path for path in self.root.glob(pattern) if path.is_dir())
                zones.extend(self._zone(path) for path in matches)
            elif (self.root / pattern).is_dir():
                zones.append(self._zone(self.root / pattern))
        return zones

    def _zone(self, path: Path) -> Zone:
        return Zone(
            name=path.relative_to(self.root).as_posix(),
            path=path,
            type=detect_project_type(path),
        )


def _unique(zones: Iterable[Zone]) -> List[Zone]:
    seen = set()
    unique = []
    for zone in zones:
        if zone.name in seen:
            continue
        seen.add(zone.name)
        unique.append(zone)
    return unique
