"""Load ``frontend-standards.yml`` and merge it with the built-in rules."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml

from .rules import Rule, regex_rule
from .rules.defaults import default_rules
from .severity import Category, Severity
from .utils.code import DEFAULT_EXTENSIONS
from .utils.fileio import read_yaml_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAMES = ("frontend-standards.yml", "frontend-standards.yaml")
DEFAULT_RULE_TIME_BUDGET_MS = 500
DEFAULT_CONCURRENCY = 8

REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


class ConfigError(ValueError):
    """Raised when the configuration file cannot be used."""


@dataclass(frozen=True)
class ZoneSettings:
    include_packages: bool = False
    custom_zones: Tuple[str, ...] = ()
    only_zone: Optional[str] = None


@dataclass(frozen=True)
class RuleOverride:
    """Per-rule settings from the ``rules`` mapping of the configuration file."""

    enabled: bool = True
    severity: Optional[Severity] = None
    message: Optional[str] = None
    category: Optional[Category] = None

    def apply(self, rule: Rule) -> Optional[Rule]:
        if not self.enabled:
            return None
        changes: Dict[str, object] = {}
        if self.severity is not None:
            changes["severity"] = self.severity
        if self.message is not None:
            changes["message"] = self.message
        if self.category is not None:
            changes["category"] = self.category
        return rule.with_overrides(**changes) if changes else rule


@dataclass(frozen=True)
class StandardsConfig:
    """Effective configuration for a scan. Treated as immutable once loaded."""

    rules: Tuple[Rule, ...] = field(default_factory=lambda: tuple(default_rules()))
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    ignore_patterns: Tuple[str, ...] = ()
    zones: ZoneSettings = field(default_factory=ZoneSettings)
    zone_overrides: Mapping[str, Mapping[str, RuleOverride]] = field(default_factory=dict)
    rule_time_budget_ms: Optional[int] = DEFAULT_RULE_TIME_BUDGET_MS
    concurrency: int = DEFAULT_CONCURRENCY
    source: Optional[Path] = None

    def for_zone(self, zone: str) -> "StandardsConfig":
        """Return the configuration with the overrides declared for ``zone`` applied."""

        overrides = self.zone_overrides.get(zone)
        if not overrides:
            return self
        return replace(self, rules=tuple(apply_overrides(self.rules, overrides)))

    def skip_categories(self, categories: Iterable[Category]) -> "StandardsConfig":
        skipped = set(categories)
        if not skipped:
            return self
        return replace(self, rules=tuple(rule for rule in self.rules if rule.category not in skipped))


def apply_overrides(rules: Iterable[Rule], overrides: Mapping[str, RuleOverride]) -> List[Rule]:
    result: List[Rule] = []
    known = set()
    for rule in rules:
        known.add(rule.name)
        override = overrides.get(rule.name)
        updated = override.apply(rule) if override is not None else rule
        if updated is not None:
            result.append(updated)
    for name in overrides:
        if name not in known:
            logger.warning("Unknown rule in configuration: %s", name)
    return result


def _parse_enum(parser: Any, value: object, where: str) -> Any:
    try:
        return parser(value)
    except ValueError as exc:
        raise ConfigError(f"{where}: {exc}") from None


def _parse_enabled(value: object, where: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{where}.enabled must be true or false")
    return value


def parse_rule_overrides(data: object, where: str = "rules") -> Dict[str, RuleOverride]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{where} must be a mapping of rule names to settings")

    overrides: Dict[str, RuleOverride] = {}
    for name, value in data.items():
        entry = f"{where}.{name}"
        if isinstance(value, bool):
            overrides[str(name)] = RuleOverride(enabled=value)
        elif isinstance(value, dict):
            overrides[str(name)] = RuleOverride(
                enabled=_parse_enabled(value.get("enabled", True), entry),
                severity=_parse_enum(Severity.parse, value["severity"], entry) if "severity" in value else None,
                message=str(value["message"]) if "message" in value else None,
                category=_parse_enum(Category.parse, value["category"], entry) if "category" in value else None,
            )
        else:
            raise ConfigError(f"{entry} must be true, false or a mapping")
    return overrides


def _parse_flags(value: object, where: str) -> int:
    flags = 0
    for letter in str(value or ""):
        if letter not in REGEX_FLAGS:
            raise ConfigError(f"{where}: unknown regex flag {letter!r}")
        flags |= REGEX_FLAGS[letter]
    return flags


def parse_custom_rules(data: object) -> List[Rule]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError("customRules must be a list")

    rules: List[Rule] = []
    for index, item in enumerate(data):
        where = f"customRules[{index}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{where} must be a mapping")
        missing = [key for key in ("name", "pattern", "message") if not item.get(key)]
        if missing:
            raise ConfigError(f"{where} is missing {', '.join(missing)}")
        try:
            rule = regex_rule(
                str(item["name"]),
                str(item["pattern"]),
                str(item["message"]),
                category=_parse_enum(Category.parse, item.get("category", "content"), where),
                severity=_parse_enum(Severity.parse, item.get("severity", "error"), where),
                per_line=bool(item.get("perLine", False)),
                flags=_parse_flags(item.get("flags"), where),
            )
        except re.error as exc:
            raise ConfigError(f"{where}: invalid pattern: {exc}") from None
        rules.append(rule)
    return rules


def _merge_rules(base: Iterable[Rule], custom: Iterable[Rule]) -> List[Rule]:
    merged = list(base)
    positions = {rule.name: index for index, rule in enumerate(merged)}
    for rule in custom:
        if rule.name in positions:
            merged[positions[rule.name]] = rule
        else:
            positions[rule.name] = len(merged)
            merged.append(rule)
    return merged


def _parse_zones(data: object) -> ZoneSettings:
    if data is None:
        return ZoneSettings()
    if not isinstance(data, dict):
        raise ConfigError("zones must be a mapping")
    custom = data.get("customZones") or []
    if not isinstance(custom, list):
        raise ConfigError("zones.customZones must be a list")
    only_zone = data.get("onlyZone")
    return ZoneSettings(
        include_packages=bool(data.get("includePackages", False)),
        custom_zones=tuple(str(zone) for zone in custom),
        only_zone=str(only_zone) if only_zone else None,
    )


def _string_tuple(data: object, key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    if data is None:
        return default
    if not isinstance(data, list):
        raise ConfigError(f"{key} must be a list")
    return tuple(str(item) for item in data)


def _positive_int(data: object, key: str, default: Optional[int]) -> Optional[int]:
    if data is None:
        return default
    if isinstance(data, bool) or not isinstance(data, int) or data < 0:
        raise ConfigError(f"{key} must be a non-negative integer")
    return data


def build_config(data: Mapping[str, Any], source: Optional[Path] = None) -> StandardsConfig:
    """Turn a parsed configuration mapping into a ``StandardsConfig``."""

    overrides = parse_rule_overrides(data.get("rules"))
    custom = parse_custom_rules(data.get("customRules"))
    if data.get("merge", True):
        rules = apply_overrides(_merge_rules(default_rules(), custom), overrides)
    else:
        rules = apply_overrides(custom, overrides) if overrides else custom

    zone_overrides_data = data.get("zoneOverrides") or {}
    if not isinstance(zone_overrides_data, dict):
        raise ConfigError("zoneOverrides must be a mapping")
    zone_overrides = {}
    for zone, settings in zone_overrides_data.items():
        rules_data = settings.get("rules") if isinstance(settings, dict) else None
        zone_overrides[str(zone)] = parse_rule_overrides(rules_data, f"zoneOverrides.{zone}.rules")

    concurrency = _positive_int(data.get("concurrency"), "concurrency", DEFAULT_CONCURRENCY)
    if not concurrency:
        raise ConfigError("concurrency must be at least 1")
    return StandardsConfig(
        rules=tuple(rules),
        extensions=_string_tuple(data.get("extensions"), "extensions", DEFAULT_EXTENSIONS),
        ignore_patterns=_string_tuple(data.get("ignorePatterns"), "ignorePatterns", ()),
        zones=_parse_zones(data.get("zones")),
        zone_overrides=zone_overrides,
        rule_time_budget_ms=_positive_int(
            data.get("ruleTimeBudgetMs"), "ruleTimeBudgetMs", DEFAULT_RULE_TIME_BUDGET_MS
        ),
        concurrency=concurrency,
        source=source,
    )


def find_config_file(root: Path) -> Optional[Path]:
    for name in DEFAULT_CONFIG_NAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def load_config(root: Path, config_path: Optional[Path] = None) -> StandardsConfig:
    """Load the configuration for ``root``.

    An explicit ``config_path`` must exist. Without one, the default file
    names are looked up in ``root`` and the built-in rules are used when none
    is present.
    """

    if config_path is not None:
        path = config_path if config_path.is_absolute() else root / config_path
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
    else:
        path = find_config_file(root)
        if path is None:
            logger.info("No configuration file found, using default rules")
            return StandardsConfig()

    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {path} is not a mapping")

    config = build_config(data, source=path)
    logger.info("Loaded configuration from %s (%d rules)", path, len(config.rules))
    return config
