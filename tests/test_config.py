import pytest

from standards_checker.config import (
    DEFAULT_RULE_TIME_BUDGET_MS,
    ConfigError,
    RuleOverride,
    StandardsConfig,
    apply_overrides,
    build_config,
    load_config,
)
from standards_checker.rules import SingleViolation
from standards_checker.rules.defaults import default_rules
from standards_checker.severity import Category, Severity
from standards_checker.utils.code import DEFAULT_EXTENSIONS


def _write_config(tmp_path, text, name="frontend-standards.yml"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _names(config):
    return [rule.name for rule in config.rules]


def test_missing_default_config_uses_built_in_rules(tmp_path):
    config = load_config(tmp_path)

    assert _names(config) == [rule.name for rule in default_rules()]
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.rule_time_budget_ms == DEFAULT_RULE_TIME_BUDGET_MS
    assert config.source is None


def test_missing_explicit_config_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "missing.yml")


def test_rule_overrides_change_and_disable_rules(tmp_path):
    _write_config(
        tmp_path,
        """
rules:
  No console.log: false
  No var:
    severity: warning
    message: Prefer const
""",
    )

    config = load_config(tmp_path)
    rules = {rule.name: rule for rule in config.rules}

    assert "No console.log" not in rules
    assert rules["No var"].severity is Severity.WARNING
    assert rules["No var"].message == "Prefer const"
    assert config.source == tmp_path / "frontend-standards.yml"


def test_unknown_rule_override_is_logged(caplog):
    rules = apply_overrides(default_rules(), {"Does not exist": RuleOverride(enabled=False)})

    assert len(rules) == len(default_rules())
    assert "Unknown rule in configuration: Does not exist" in caplog.text


def test_custom_rules_are_added_and_replace_same_name():
    config = build_config(
        {
            "customRules": [
                {"name": "No debugger", "pattern": "debugger", "message": "Remove debugger", "severity": "warning"},
                {"name": "No var", "pattern": "\\bvar\\b", "message": "Custom var", "perLine": True},
            ]
        }
    )
    rules = {rule.name: rule for rule in config.rules}

    assert _names(config).count("No var") == 1
    assert rules["No var"].message == "Custom var"
    assert rules["No debugger"].severity is Severity.WARNING
    assert rules["No debugger"].category is Category.CONTENT
    assert rules["No debugger"].check("debugger;", "a.ts") == SingleViolation()
    assert _names(config)[-1] == "No debugger"


def test_merge_false_uses_only_custom_rules():
    config = build_config(
        {
            "merge": False,
            "customRules": [{"name": "No debugger", "pattern": "debugger", "message": "Remove debugger"}],
        }
    )

    assert _names(config) == ["No debugger"]


def test_zone_overrides_apply_per_zone():
    config = build_config({"zoneOverrides": {"apps/legacy": {"rules": {"No var": False}}}})

    assert "No var" in _names(config)
    assert "No var" not in _names(config.for_zone("apps/legacy"))
    assert config.for_zone("apps/web") is config


def test_zone_settings_and_scan_options_are_parsed():
    config = build_config(
        {
            "zones": {"includePackages": True, "customZones": ["tools"], "onlyZone": "apps"},
            "extensions": [".ts"],
            "ignorePatterns": ["generated"],
            "ruleTimeBudgetMs": 100,
            "concurrency": 2,
        }
    )

    assert config.zones.include_packages is True
    assert config.zones.custom_zones == ("tools",)
    assert config.zones.only_zone == "apps"
    assert config.extensions == (".ts",)
    assert config.ignore_patterns == ("generated",)
    assert config.rule_time_budget_ms == 100
    assert config.concurrency == 2


@pytest.mark.parametrize(
    "text, match",
    [
        ("rules: [\n", "Invalid YAML"),
        ("- just\n- a list\n", "not a mapping"),
        ("rules:\n  No var:\n    severity: fatal\n", "Unknown severity"),
        ("customRules:\n  - name: Broken\n    pattern: '('\n    message: x\n", "invalid pattern"),
        ("customRules:\n  - name: Broken\n", "missing pattern, message"),
        ("customRules:\n  - name: Flags\n    pattern: x\n    message: x\n    flags: q\n", "unknown regex flag"),
        ("concurrency: -1\n", "non-negative integer"),
        ("extensions: .ts\n", "extensions must be a list"),
    ],
)
def test_invalid_configuration_raises(tmp_path, text, match):
    _write_config(tmp_path, text)

    with pytest.raises(ConfigError, match=match):
        load_config(tmp_path)


def test_empty_config_file_falls_back_to_defaults(tmp_path):
    _write_config(tmp_path, "", name="frontend-standards.yaml")

    config = load_config(tmp_path)

    assert len(config.rules) == len(default_rules())


def test_skip_categories():
    config = StandardsConfig().skip_categories([Category.NAMING])
    categories = {rule.category for rule in config.rules}

    assert Category.NAMING not in categories
    assert Category.CONTENT in categories
    assert StandardsConfig().skip_categories([]).rules == StandardsConfig().rules


def test_rule_overrides_apply_to_custom_rules():
    config = build_config(
        {
            "customRules": [
                {"name": "No todo", "pattern": "TODO", "message": "Resolve TODOs"},
                {"name": "No fixme", "pattern": "FIXME", "message": "Resolve FIXMEs"},
            ],
            "rules": {"No todo": False, "No fixme": {"severity": "info"}},
        }
    )
    rules = {rule.name: rule for rule in config.rules}

    assert "No todo" not in rules
    assert rules["No fixme"].severity is Severity.INFO


def test_custom_rule_override_is_not_reported_unknown(caplog):
    build_config(
        {
            "customRules": [{"name": "No todo", "pattern": "TODO", "message": "Resolve TODOs"}],
            "rules": {"No todo": False},
        }
    )

    assert "Unknown rule in configuration" not in caplog.text


@pytest.mark.parametrize(
    "data, match",
    [
        ({"concurrency": 0}, "at least 1"),
        ({"rules": {"No var": {"enabled": "false"}}}, "enabled must be true or false"),
    ],
)
def test_invalid_settings_are_rejected(data, match):
    with pytest.raises(ConfigError, match=match):
        build_config(data)


def test_enabled_false_in_mapping_disables_rule():
    config = build_config({"rules": {"No var": {"enabled": False}}})

    assert "No var" not in _names(config)
