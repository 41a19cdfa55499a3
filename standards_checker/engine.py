"""Rule engine: apply a rule set and the additional validators to one file at a time."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .config import StandardsConfig
from .result import Violation, file_validation_error
from .rules import (
    DetailKind,
    LineViolations,
    Rule,
    SingleViolation,
    normalize_result,
)
from .utils.fileio import read_source_file
from .validators import CONTENT_VALIDATORS, PATH_VALIDATORS, Validator

logger = logging.getLogger(__name__)

CONFIGURATION_FILE_PATTERNS = tuple(
    re.compile(pattern)
    for pattern in (
        r"\.config\.(js|ts|mjs|cjs|json)$",
        r"^(jest|vite|webpack|tailwind|next|eslint|prettier|babel|rollup|tsconfig)\.config\.",
        r"^(vitest|nuxt|quasar)\.config\.",
        r"^tsconfig.*\.json$",
        r"^\.eslintrc",
        r"^\.prettierrc",
        r"^babel\.config",
        r"^postcss\.config",
        r"^stylelint\.config",
        r"^cypress\.config",
        r"^playwright\.config",
        r"^storybook\.config",
        r"^metro\.config",
        r"^expo\.config",
    )
)

INDEX_FILE_NAMES = frozenset({"index.ts", "index.tsx", "index.js", "index.jsx"})


def _basename(file_path: str) -> str:
    return PurePosixPath(str(file_path).replace("\\", "/")).name


def is_configuration_file(file_path: str) -> bool:
    """Return ``True`` for tool configuration files, judged by file name only."""

    name = _basename(file_path)
    return any(pattern.search(name) for pattern in CONFIGURATION_FILE_PATTERNS)


def is_index_file(file_path: str) -> bool:
    return _basename(file_path) in INDEX_FILE_NAMES


def describe_error(value: object) -> str:
    """Turn any caught value into readable text for logs and messages."""

    if isinstance(value, BaseException):
        text = str(value)
        if isinstance(value, OSError) and value.strerror:
            text = value.strerror
            if value.filename:
                text = f"{text}: {value.filename!s}"
        return text or type(value).__name__
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return f"{type(value).__name__} object: {value!r}"
    if value is None:
        return "None"
    if isinstance(value, (int, float, bool)):
        return str(value)
    return f"{type(value).__name__} object: {value!r}"


def deduplicate(violations: Iterable[Violation]) -> List[Violation]:
    """Drop repeats of ``(file_path, rule, line)``, keeping the first occurrence."""

    seen: Set[Tuple[str, str, Optional[int]]] = set()
    unique: List[Violation] = []
    for violation in violations:
        key = violation.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(violation)
    return unique


def _shadowing_message(variable: str, line: int, rule: Rule) -> str:
    return f"Variable '{variable}' shadows a variable from an outer scope (line {line}). {rule.message}"


class RuleEngine:
    """Validate files against a rule set.

    The engine holds no state besides its configuration, so one instance may
    validate many files concurrently. Build a new engine (``for_zone``) rather
    than re-initializing one that still has validations in flight.
    """

    def __init__(
        self,
        config: Optional[StandardsConfig] = None,
        *,
        content_validators: Optional[Sequence[Validator]] = None,
        path_validators: Optional[Sequence[Validator]] = None,
    ) -> None:
        self._config: Optional[StandardsConfig] = None
        self._rules: Tuple[Rule, ...] = ()
        self._content_validators: Tuple[Validator, ...] = tuple(
            CONTENT_VALIDATORS if content_validators is None else content_validators
        )
        self._path_validators: Tuple[Validator, ...] = tuple(
            PATH_VALIDATORS if path_validators is None else path_validators
        )
        if config is not None:
            self.initialize(config)

    @classmethod
    def for_zone(cls, config: StandardsConfig, zone: str, **kwargs: object) -> "RuleEngine":
        return cls(config.for_zone(zone), **kwargs)  # type: ignore[arg-type]

    def initialize(self, config: StandardsConfig) -> None:
        """Replace the rule list and configuration wholesale."""

        self._config = config
        self._rules = tuple(config.rules)
        logger.debug("Rule engine initialized with %d rules", len(self._rules))

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    @property
    def config(self) -> Optional[StandardsConfig]:
        return self._config

    def is_configuration_file(self, file_path: str) -> bool:
        return is_configuration_file(file_path)

    async def validate(self, content: str, file_path: str) -> List[Violation]:
        """Validate ``file_path`` as it is on disk.

        ``content`` is accepted for callers that already hold the text, but the
        file is read again so the report always reflects the disk state.
        """

        return await self.validate_file(file_path)

    async def validate_file(self, file_path: str) -> List[Violation]:
        """Return the violations for one file. Never raises."""

        path = str(file_path)
        if is_configuration_file(path):
            logger.debug("Skipping configuration file %s", path)
            return []

        try:
            try:
                content = await asyncio.to_thread(read_source_file, Path(path))
            except (OSError, UnicodeDecodeError) as exc:
                detail = describe_error(exc)
                logger.error("Could not read %s: %s", path, detail)
                return [file_validation_error(path, detail)]
            return self.check_content(content, path)
        except Exception as exc:
            detail = describe_error(exc)
            logger.error("Error validating file %s: %s", path, detail)
            return [file_validation_error(path, detail)]

    def check_content(self, content: str, file_path: str) -> List[Violation]:
        """Run the full per-file pipeline over already read content."""

        errors: List[Violation] = []
        deferred: List[Rule] = []
        for rule in self._rules:
            if rule.skip_in_basic_pass:
                deferred.append(rule)
                continue
            errors.extend(self.apply_rule(rule, content, file_path))

        if not is_index_file(file_path):
            errors.extend(self._run_validators(content, file_path))
            for rule in deferred:
                errors.extend(self.apply_rule(rule, content, file_path))

        return deduplicate(errors)

    def apply_rule(self, rule: Rule, content: str, file_path: str) -> List[Violation]:
        started = time.perf_counter()
        try:
            outcome = normalize_result(rule.check(content, file_path))
        except Exception as exc:
            logger.warning('Rule "%s" failed for %s: %s', rule.name, file_path, describe_error(exc))
            return []
        finally:
            self._check_budget(rule, file_path, (time.perf_counter() - started) * 1000)

        if isinstance(outcome, LineViolations):
            return [self._violation(rule, file_path, line=line) for line in outcome.lines]
        if isinstance(outcome, SingleViolation):
            detail = outcome.detail
            if rule.detail_kind is DetailKind.SHADOWING and detail is not None:
                return [
                    self._violation(
                        rule,
                        file_path,
                        message=_shadowing_message(detail.variable, detail.line, rule),
                        line=detail.line,
                    )
                ]
            return [self._violation(rule, file_path)]
        return []

    def _check_budget(self, rule: Rule, file_path: str, elapsed_ms: float) -> None:
        budget = self._config.rule_time_budget_ms if self._config is not None else None
        if budget and elapsed_ms > budget:
            logger.warning(
                'Rule "%s" took %.0f ms for %s (budget %d ms)',
                rule.name,
                elapsed_ms,
                file_path,
                budget,
            )

    def _run_validators(self, content: str, file_path: str) -> List[Violation]:
        errors: List[Violation] = []
        for kind, validators in (("content", self._content_validators), ("file", self._path_validators)):
            for validator in validators:
                try:
                    errors.extend(validator(content, file_path))
                except Exception as exc:
                    logger.warning(
                        "Failed to run %s validator %s for %s: %s",
                        kind,
                        getattr(validator, "__name__", repr(validator)),
                        file_path,
                        describe_error(exc),
                    )
        return errors

    @staticmethod
    def _violation(
        rule: Rule,
        file_path: str,
        *,
        message: Optional[str] = None,
        line: Optional[int] = None,
    ) -> Violation:
        return Violation(
            rule=rule.name,
            message=rule.message if message is None else message,
            file_path=file_path,
            severity=rule.severity,
            category=rule.category,
            line=line,
        )
