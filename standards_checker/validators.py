"""Hard-coded content and path heuristics run alongside the declarative rules."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple

from .result import Violation
from .severity import Category, Severity

Validator = Callable[[str, str], List[Violation]]


def _posix(file_path: str) -> str:
    return file_path.replace("\\", "/")


def _basename(file_path: str) -> str:
    return PurePosixPath(_posix(file_path)).name


def _violation(
    rule: str,
    message: str,
    file_path: str,
    category: Category,
    severity: Severity = Severity.ERROR,
    line: Optional[int] = None,
) -> Violation:
    return Violation(
        rule=rule,
        message=message,
        file_path=file_path,
        severity=severity,
        category=category,
        line=line,
    )


# ------------------------------------------------------------------
# Content validators
# ------------------------------------------------------------------
INLINE_STYLE_PATTERN = re.compile(r"style\s*=\s*\{\{")


def check_inline_styles(content: str, file_path: str) -> List[Violation]:
    """Report the first inline style object; later ones add nothing new."""

    path = _posix(file_path)
    if "/Svg/" in path or ".svg" in path:
        return []
    for index, line in enumerate(content.split("\n"), start=1):
        if INLINE_STYLE_PATTERN.search(line):
            return [
                _violation(
                    "Inline styles",
                    "Inline styles are not allowed. Use .style.ts files or reference external stylesheets",
                    file_path,
                    Category.STYLE,
                    line=index,
                )
            ]
    return []


VALID_COMMENT_PATTERNS: Sequence[re.Pattern[str]] = (
    re.compile(r"^(TODO|FIXME|NOTE|HACK|BUG|XXX):", re.IGNORECASE),
    re.compile(r"^(This|The|When|If|For|To|Used)"),
    re.compile(r"^(Returns?|Handles?|Checks?|Sets?|Gets?)"),
    re.compile(
        r"because|since|due to|in order to|to ensure|to avoid|to prevent|explanation|reason",
        re.IGNORECASE,
    ),
    re.compile(r"config|setting|option|parameter|default|override", re.IGNORECASE),
    re.compile(r"^[A-Z][a-z]*(\s+[a-z]+){0,3}\.?$"),
    re.compile(r"^(and|or|but|however|therefore|thus|also|additionally)"),
)

CODE_LIKE_PATTERNS: Sequence[re.Pattern[str]] = (
    re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*\s*\("),
    re.compile(r"^(?:(?:const|let|var)\s+)?[a-zA-Z_$][a-zA-Z0-9_$]*\s*="),
    re.compile(r"^return\s+"),
    re.compile(r"^(import|export)\s+"),
    re.compile(r"^[{\[].*[}\]]$"),
    re.compile(r"^console\.[a-z]+\s*\("),
    re.compile(r"^(if|for|while|switch|try|catch)\s*\("),
)


def _is_explanatory_comment(line: str, comment: str) -> bool:
    if re.search(r"eslint|tslint|@ts-|prettier", line):
        return True
    if any(pattern.search(comment) for pattern in VALID_COMMENT_PATTERNS):
        return True
    return len(comment) > 50 and not re.match(r"^[a-z]+\(", comment)


def check_commented_code(content: str, file_path: str) -> List[Violation]:
    errors: List[Violation] = []
    in_jsdoc = False
    in_block = False

    for index, line in enumerate(content.split("\n"), start=1):
        if re.match(r"^\s*/\*\*", line):
            in_jsdoc = "*/" not in line[line.index("/**") + 3:]
            continue
        if in_jsdoc:
            if "*/" in line:
                in_jsdoc = False
            continue
        if re.match(r"^\s*/\*", line):
            in_block = "*/" not in line[line.index("/*") + 2:]
            continue
        if in_block:
            if "*/" in line:
                in_block = False
            continue
        if re.match(r"^\s*\*", line) or not re.match(r"^\s*//", line):
            continue

        comment = re.sub(r"^//\s*", "", line.strip())
        if _is_explanatory_comment(line, comment):
            continue
        if any(pattern.search(comment) for pattern in CODE_LIKE_PATTERNS):
            errors.append(
                _violation(
                    "Commented code",
                    "Leaving commented code in the repository is not allowed.",
                    file_path,
                    Category.CONTENT,
                    line=index,
                )
            )
    return errors


HARDCODED_PATTERN = re.compile(r"(['\"]).*(\d{3,}|lorem|dummy|test|prueba|foo|bar|baz).*\1")
CSS_CONTEXT_PATTERN = re.compile(r"className\s*=|class\s*=|style\s*=")
CLASS_CONTEXT_PATTERN = re.compile(r"(className|class)\s*[:=]\s*['\"`]")
TAILWIND_PATTERNS: Sequence[re.Pattern[str]] = tuple(
    re.compile(pattern)
    for pattern in (
        r"\b[pmwh]-\d+\b",
        r"\b(text|bg|border|rounded|shadow)-\d+\b",
        r"\b(grid|flex|space|gap)-\d+\b",
        r"\b(top|bottom|left|right|inset)-\d+\b",
        r"\b(font|leading|tracking|opacity)-\d+\b",
        r"\b([smd]|lg|xl|2xl):",
        r"\b(text|bg|border)-([a-z]+)-(50|100|200|300|400|500|600|700|800|900|950)\b",
        r"\b(from|via|to|ring|outline|divide|decoration)-([a-z]+)-(50|[1-9]00|950)\b",
        r"\b(text|bg|border)-[a-z]+-[a-z]*-?\d{2,3}\b",
    )
)
VALID_CONFIGURATION_PATTERNS: Sequence[re.Pattern[str]] = tuple(
    re.compile(pattern)
    for pattern in (
        r"(weight|subsets|style|display)\s*:\s*\[",
        r"\b(timeout|port|delay|duration|interval|retry|maxRetries|limit|size|width|height|fontSize|lineHeight)"
        r"\s*:\s*['\"]?\d+['\"]?",
        r"['\"](\d+\.){1,2}\d+['\"]",
        r"['\"]/api/v\d+/",
        r"(from|to|via|offset|opacity|scale|rotate|skew|translate)\s*:\s*['\"][\d-]+['\"]",
        r"(fontSize|spacing|borderRadius|colors)\s*:\s*\{",
        r"\b(useTranslations|t)\s*\(\s*['\"][a-zA-Z]+(\.[a-zA-Z]+)*['\"]",
        r"\b(toast|notification)\.(success|error|info|warning)\s*\(\s*t\s*\(",
        r"['\"][a-zA-Z]+(\.[a-zA-Z]+){2,}['\"]",
    )
)
CONFIG_LIKE_PATH = re.compile(r"/(config|configs|constants|theme|styles|fonts)/|\.(config|constants|theme|styles|fonts)\.(ts|tsx|js|jsx)$")
TEST_LIKE_PATH = re.compile(r"mock|__test__|\.test\.|\.spec\.")


def is_config_or_constants_file(file_path: str) -> bool:
    return bool(re.search(r"config|constants", file_path, re.IGNORECASE)) and file_path.endswith(".ts")


def _is_exempt_literal_line(line: str) -> bool:
    stripped = line.strip()
    return bool(
        CSS_CONTEXT_PATTERN.search(line)
        or CLASS_CONTEXT_PATTERN.search(line)
        or any(pattern.search(line) for pattern in TAILWIND_PATTERNS)
        or re.search(r"import.*from", stripped)
        or re.search(r"https?://", line)
        or re.match(r"^\s*//", line)
        or (re.match(r"^\s*/\*", line) and "*/" in line)
        or any(pattern.search(line) for pattern in VALID_CONFIGURATION_PATTERNS)
    )


def check_hardcoded_data(content: str, file_path: str) -> List[Violation]:
    path = _posix(file_path)
    if (
        is_config_or_constants_file(path)
        or CONFIG_LIKE_PATH.search(path)
        or TEST_LIKE_PATH.search(path)
        or "jest.setup" in path
    ):
        return []

    errors: List[Violation] = []
    in_jsdoc = False
    for index, line in enumerate(content.split("\n"), start=1):
        if re.match(r"^\s*/\*\*", line):
            in_jsdoc = True
        if in_jsdoc:
            if "*/" in line:
                in_jsdoc = False
            continue
        if re.match(r"^\s*\*", line):
            continue
        if HARDCODED_PATTERN.search(line) and not _is_exempt_literal_line(line):
            errors.append(
                _violation(
                    "Hardcoded data",
                    "No hardcoded data should be left in the code except in mocks.",
                    file_path,
                    Category.CONTENT,
                    line=index,
                )
            )
    return errors


FUNCTION_DECLARATION_PATTERNS: Sequence[re.Pattern[str]] = tuple(
    re.compile(pattern)
    for pattern in (
        r"export\s+const\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*=\s*\(.*\)\s*=>",
        r"export\s+const\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*=\s*async\s*\(.*\)\s*=>",
        r"const\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*=\s*async\s*\(.*\)\s*=>",
        r"export\s+function\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*\(",
        r"const\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*=\s*function\s*\(",
        r"function\s+([a-zA-Z_$][a-zA-Z0-9_$]{1,39})\s*\(",
    )
)

COMPLEXITY_WEIGHTS: Sequence[Tuple[re.Pattern[str], float]] = (
    (re.compile(r"\b(if|else if|switch|case)\b"), 1),
    (re.compile(r"\b(for|while|do)\b"), 2),
    (re.compile(r"\b(try|catch|finally)\b"), 2),
    (re.compile(r"\b(async|await|Promise\.all|Promise\.resolve|Promise\.reject|\.then|\.catch)\b"), 2),
    (re.compile(r"\.(map|filter|reduce|forEach|find|some|every)\s*\("), 1),
    (re.compile(r"\?\s*[a-zA-Z0-9_$,\s=\[\]{}:.<>]{0,100}\s*:"), 1),
    (re.compile(r"&&|\|\|"), 0.5),
)


@dataclass
class FunctionComplexity:
    score: float
    lines: int

    def is_complex(self, function_source: str) -> bool:
        return (
            self.score >= 3
            or self.lines > 8
            or (self.score >= 2 and bool(re.search(r"async|await|Promise", function_source)))
        )


def _detect_function_name(stripped: str) -> Optional[str]:
    for pattern in FUNCTION_DECLARATION_PATTERNS:
        match = pattern.search(stripped)
        if match:
            return match.group(1)
    return None


def analyze_function_complexity(lines: Sequence[str], start: int) -> FunctionComplexity:
    """Score the function starting at ``start`` (0-based), looking at most 30 lines ahead."""

    score = 0.0
    braces = 0
    in_function = False
    counted = 0
    for body_line in lines[start:start + 30]:
        if not body_line:
            continue
        braces += body_line.count("{") - body_line.count("}")
        in_function = in_function or braces > 0
        if in_function:
            counted += 1
            score += sum(weight for pattern, weight in COMPLEXITY_WEIGHTS if pattern.search(body_line))
        if in_function and braces == 0:
            break
    return FunctionComplexity(score=score, lines=counted)


def _has_preceding_comment(lines: Sequence[str], index: int) -> bool:
    for candidate in lines[max(0, index - 15):index]:
        stripped = candidate.strip()
        if not stripped:
            continue
        if "/**" in stripped or "*/" in stripped or "/*" in stripped:
            return True
        if stripped.startswith("*") and len(stripped) > 5:
            return True
        if (
            stripped.startswith("//")
            and len(stripped) > 15
            and not re.match(r"^\s*//\s*(TODO|FIXME|NOTE|HACK)", stripped)
        ):
            return True
    return False


def check_function_comments(content: str, file_path: str) -> List[Violation]:
    lines = content.split("\n")
    errors: List[Violation] = []
    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith(("//", "*", "/*")):
            continue
        name = _detect_function_name(stripped)
        if not name:
            continue
        if "interface " in stripped or "type " in stripped:
            continue
        if "=>" in stripped and len(stripped) < 80 and "async" not in stripped:
            continue

        complexity = analyze_function_complexity(lines, index)
        function_source = "\n".join(lines[index:])
        if not complexity.is_complex(function_source) or _has_preceding_comment(lines, index):
            continue
        errors.append(
            _violation(
                "Missing comment in complex function",
                f"Complex function '{name}' (complexity: {complexity.score:.1f}, lines: {complexity.lines}) "
                "must have comments explaining its behavior.",
                file_path,
                Category.DOCUMENTATION,
                severity=Severity.WARNING,
                line=index + 1,
            )
        )
    return errors


FUNCTION_DECL_NAME = re.compile(r"function\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\(")
ARROW_ASSIGN_NAME = re.compile(r"(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*(?:async\s*)?\(")
CAMEL_CASE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
PASCAL_CASE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")


def check_function_naming(content: str, file_path: str) -> List[Violation]:
    errors: List[Violation] = []
    for index, line in enumerate(content.split("\n"), start=1):
        names = FUNCTION_DECL_NAME.findall(line) + ARROW_ASSIGN_NAME.findall(line)
        for name in names:
            # components and hooks
            if name[0].isupper() or name.startswith("use"):
                continue
            if not CAMEL_CASE.match(name):
                errors.append(
                    _violation(
                        "Function naming",
                        "Functions must follow camelCase convention (e.g., getProvinces)",
                        file_path,
                        Category.NAMING,
                        line=index,
                    )
                )
    return errors


EXPORTED_INTERFACE = re.compile(r"export\s+interface\s+([a-zA-Z_$][a-zA-Z0-9_$]*)")


def check_interface_naming(content: str, file_path: str) -> List[Violation]:
    errors: List[Violation] = []
    seen: Set[str] = set()
    for index, line in enumerate(content.split("\n"), start=1):
        for name in EXPORTED_INTERFACE.findall(line):
            if name in seen:
                continue
            seen.add(name)
            if not re.match(r"^I[A-Z][a-zA-Z0-9]*$", name):
                errors.append(
                    _violation(
                        "Interface naming",
                        'Exported interfaces must start with "I" and follow PascalCase (e.g., IButtonProps)',
                        file_path,
                        Category.NAMING,
                        line=index,
                    )
                )
    return errors


STYLE_EXPORT = re.compile(r"export\s+const\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=")


def check_style_conventions(content: str, file_path: str) -> List[Violation]:
    if not file_path.endswith(".style.ts"):
        return []
    errors: List[Violation] = []
    for index, line in enumerate(content.split("\n"), start=1):
        if re.search(r"StyleSheet\.create\s*\(", line):
            continue
        match = STYLE_EXPORT.search(line)
        if match and not re.match(r"^[a-z][a-zA-Z0-9]*Styles$", match.group(1)):
            name = match.group(1)
            errors.append(
                _violation(
                    "Style object naming",
                    f"Style object '{name}' should be in camelCase and end with 'Styles' (e.g., cardPreviewStyles)",
                    file_path,
                    Category.NAMING,
                    line=index,
                )
            )
    return errors


VARIABLE_DECLARATION = re.compile(r"^\s*(export\s+)?(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*[:=]")


def find_unused_variables(content: str, file_path: str) -> List[int]:
    """Return declaration lines of simple variables never referenced again.

    Text heuristic: a name that appears exactly once in the file (its own
    declaration) is unused. Exported and underscore-prefixed names are skipped.
    """

    lines = content.split("\n")
    found: List[int] = []
    seen: Set[str] = set()
    for index, line in enumerate(lines, start=1):
        match = VARIABLE_DECLARATION.match(line)
        if not match or match.group(1):
            continue
        name = match.group(2)
        if name in seen or name.startswith("_"):
            continue
        seen.add(name)
        occurrences = len(re.findall(rf"(?<![\w$.]){re.escape(name)}(?![\w$])", content))
        if occurrences == 1:
            found.append(index)
    return found


# ------------------------------------------------------------------
# Path validators
# ------------------------------------------------------------------
@dataclass(frozen=True)
class NamingRule:
    directory: str
    pattern: re.Pattern[str]
    description: str


NAMING_RULES: Sequence[NamingRule] = (
    NamingRule("components", re.compile(r"^[A-Z][a-zA-Z0-9]+\.tsx$"),
               "Components must be in PascalCase and end with .tsx"),
    NamingRule("hooks", re.compile(r"^use[A-Z][a-zA-Z0-9]*\.hook\.(ts|tsx)$"),
               "Hooks must start with use followed by PascalCase and end with .hook.ts or .hook.tsx"),
    NamingRule("constants", re.compile(r"^[a-z][a-zA-Z0-9]*\.constant\.ts$"),
               "Constants must be camelCase and end with .constant.ts"),
    NamingRule("helper", re.compile(r"^[a-z][a-zA-Z0-9]*\.helper\.ts$"),
               "Helpers must be camelCase and end with .helper.ts"),
    NamingRule("helpers", re.compile(r"^[a-z][a-zA-Z0-9]*\.helper\.ts$"),
               "Helpers must be camelCase and end with .helper.ts"),
    NamingRule("types", re.compile(r"^[a-z][a-zA-Z0-9]*(\.[a-z][a-zA-Z0-9]*)*\.type\.ts$"),
               "Types must be camelCase and end with .type.ts (may include additional extensions like .provider.type.ts)"),
    NamingRule("styles", re.compile(r"^[a-z][a-zA-Z0-9]*\.style\.ts$"),
               "Styles must be camelCase and end with .style.ts"),
    NamingRule("enums", re.compile(r"^[a-z][a-zA-Z0-9]*\.enum\.ts$"),
               "Enums must be camelCase and end with .enum.ts"),
    NamingRule("assets", re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*\.(svg|png|jpg|jpeg|gif|webp|ico)$"),
               "Assets must be in kebab-case (e.g., service-error.svg)"),
)


def check_enums_outside_types(content: str, file_path: str) -> List[Violation]:
    if "types" in _posix(file_path) and file_path.endswith(".enum.ts"):
        return [
            _violation(
                "Enum outside of types",
                "Enums must be in a separate directory from types (use /enums/ instead of /types/).",
                file_path,
                Category.STRUCTURE,
            )
        ]
    return []


HOOK_FILE = re.compile(r"^use[a-zA-Z0-9]+\.hook\.(ts|tsx)$")
RENDERS_JSX = re.compile(r"return\s*<|React\.createElement")


def check_hook_file_extension(content: str, file_path: str) -> List[Violation]:
    name = _basename(file_path)
    if not HOOK_FILE.match(name):
        return []
    if os.path.exists(os.path.join(os.path.dirname(file_path), "index.ts")):
        return []

    renders = bool(RENDERS_JSX.search(content))
    is_tsx = name.endswith(".tsx")
    if renders and not is_tsx:
        message = "Hooks that render JSX must have a .tsx extension."
    elif not renders and is_tsx:
        message = "Hooks that do not render JSX should have a .ts extension."
    else:
        return []
    return [_violation("Hook file extension", message, file_path, Category.NAMING)]


KEBAB_CASE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


def check_asset_naming(content: str, file_path: str) -> List[Violation]:
    path = _posix(file_path)
    if "/assets/" not in path or path.endswith(".d.ts"):
        return []
    stem = PurePosixPath(path).name.split(".", 1)[0]
    if KEBAB_CASE.match(stem):
        return []
    return [
        _violation(
            "Asset naming",
            "Assets must follow kebab-case convention (e.g., service-error.svg)",
            file_path,
            Category.NAMING,
        )
    ]


def check_naming_conventions(content: str, file_path: str) -> List[Violation]:
    parts = PurePosixPath(_posix(file_path)).parts
    if len(parts) < 2:
        return []
    name, parent = parts[-1], parts[-2]
    if name in ("index.ts", "index.tsx"):
        return []
    for rule in NAMING_RULES:
        if parent == rule.directory and not rule.pattern.match(name):
            return [_violation("Naming", rule.description, file_path, Category.NAMING)]
    return []


COMPONENT_FUNCTION_PATTERNS: Sequence[re.Pattern[str]] = tuple(
    re.compile(pattern)
    for pattern in (
        r"export\s+default\s+function\s+(\w+)\s*\(",
        r"export\s+const\s+([a-zA-Z_$][a-zA-Z0-9_$]{0,39})\s*=\s*\(([^)]{0,80})\)\s*=>\s*\{",
        r"const\s+([a-zA-Z_$][a-zA-Z0-9_$]{0,39})\s*=\s*\(([^)]{0,80})\)\s*=>\s*\{",
        r"function\s+(\w+)\s*\(",
        r"const\s+(\w+)\s*:\s*React\.?FC<",
        r"const\s+(\w+)\s*:\s*FC<?",
    )
)


def is_component_entry_file(file_path: str) -> bool:
    path = PurePosixPath(_posix(file_path))
    if "components" not in path.parts[:-1] or path.suffix != ".tsx":
        return False
    return path.stem == "index" or path.stem == path.parent.name


def find_component_function(content: str) -> Optional[Tuple[str, int]]:
    for pattern in COMPONENT_FUNCTION_PATTERNS:
        match = pattern.search(content)
        if match:
            return match.group(1), content[: match.start()].count("\n") + 1
    return None


def check_component_function_name_match(content: str, file_path: str) -> List[Violation]:
    if not is_component_entry_file(file_path):
        return []
    folder = PurePosixPath(_posix(file_path)).parent.name
    rule = "Component function name match"

    found = find_component_function(content)
    if found is None:
        return [
            _violation(
                rule,
                f"No main exported function found in {_basename(file_path)}. "
                f"The folder '{folder}' must contain a function with the same name.",
                file_path,
                Category.NAMING,
                line=1,
            )
        ]

    function_name, line = found
    if PASCAL_CASE.match(folder):
        matches = function_name == folder
    else:
        matches = function_name.lower() == folder.lower()
    if matches:
        return []
    if folder == folder.lower():
        hint = "The folder must follow PascalCase and the function must have exactly the same name."
    else:
        hint = f"Found: function='{function_name}', folder='{folder}'."
    return [
        _violation(
            rule,
            f"The function '{function_name}' (line {line}) must have the same name as its containing folder "
            f"'{folder}'. {hint}",
            file_path,
            Category.NAMING,
            line=line,
        )
    ]


CONTENT_VALIDATORS: Tuple[Validator, ...] = (
    check_inline_styles,
    check_commented_code,
    check_hardcoded_data,
    check_function_comments,
    check_function_naming,
    check_interface_naming,
    check_style_conventions,
)

PATH_VALIDATORS: Tuple[Validator, ...] = (
    check_enums_outside_types,
    check_hook_file_extension,
    check_asset_naming,
    check_naming_conventions,
    check_component_function_name_match,
)


# ------------------------------------------------------------------
# Directory validators (zone structure pass)
# ------------------------------------------------------------------
SKIPPED_DIRECTORIES = frozenset(
    {
        "node_modules", "coverage", "dist", "build", "public", "static", "temp", "tmp",
        "api", "lib", "utils", "pages", "components", "styles", "types", "hooks",
        "constants", "helpers", "assets", "enums", "apps", "packages", "config", "k8s", "src",
    }
)


def _camel_case_suggestion(name: str) -> str:
    return re.sub(r"[-_]([a-z])", lambda match: match.group(1).upper(), name.lower())


def check_directory_naming(relative_dir: str) -> List[Violation]:
    """Check one directory, given relative to the project root."""

    path = PurePosixPath(_posix(relative_dir))
    name = path.name
    if (
        not name
        or name.startswith((".", "__"))
        or any(char in name for char in "()[]")
        or name in SKIPPED_DIRECTORIES
    ):
        return []
    wrapped = f"/{path.as_posix()}/"
    if "/src/" not in wrapped:
        return []
    if CAMEL_CASE.match(name) or PASCAL_CASE.match(name):
        return []
    if KEBAB_CASE.match(name) and ("/app/" in wrapped or "/pages/" in wrapped):
        return []
    return [
        _violation(
            "Directory naming",
            f"Directory '{name}' should follow camelCase convention (e.g., '{_camel_case_suggestion(name)}')",
            relative_dir,
            Category.NAMING,
        )
    ]


UTILITY_DIRECTORIES = frozenset({"hooks", "types", "constants", "helpers", "utils"})


def _list_files(directory: Path) -> List[str]:
    try:
        return sorted(entry.name for entry in directory.iterdir() if entry.is_file())
    except OSError:
        return []


def check_component_structure(component_dir: Path) -> List[Violation]:
    """Check index files and sub-folder naming of a directory below ``components/``."""

    name = component_dir.name
    if name == "components":
        return []

    errors: List[Violation] = []
    index_ts = component_dir / "index.ts"
    index_tsx = component_dir / "index.tsx"
    if name in UTILITY_DIRECTORIES:
        if not index_ts.exists():
            errors.append(
                _violation(
                    "Component structure",
                    f"Utility directory '{name}' should have an index.ts file for exports",
                    str(index_ts),
                    Category.STRUCTURE,
                    severity=Severity.WARNING,
                )
            )
    elif not index_ts.exists() and not index_tsx.exists():
        errors.append(
            _violation(
                "Component structure",
                "Component must have an index.tsx file (for components) or index.ts file (for exports)",
                str(index_tsx),
                Category.STRUCTURE,
                severity=Severity.WARNING,
            )
        )

    hooks_dir = component_dir / "hooks"
    if hooks_dir.is_dir() and not any(
        file.endswith((".hook.ts", ".hook.tsx")) for file in _list_files(hooks_dir)
    ):
        errors.append(
            _violation(
                "Component structure",
                "Hooks directory should contain hook files with .hook.ts or .hook.tsx extension",
                str(hooks_dir),
                Category.STRUCTURE,
                severity=Severity.WARNING,
            )
        )

    for folder, suffix, rule, message in (
        ("types", ".type.ts", "Component type naming", "Type file should end with .type.ts"),
        ("styles", ".style.ts", "Component style naming", "Style file should end with .style.ts"),
    ):
        sub_dir = component_dir / folder
        if not sub_dir.is_dir():
            continue
        for file in _list_files(sub_dir):
            if not file.endswith(".ts") or ".test." in file or ".spec." in file or file == "index.ts":
                continue
            if not file.endswith(suffix):
                errors.append(_violation(rule, message, str(sub_dir / file), Category.NAMING))
    return errors


def validate_directories(root: Path, directories: Iterable[Path]) -> List[Violation]:
    """Run the directory validators; each offending directory name is reported once."""

    errors: List[Violation] = []
    flagged: Set[str] = set()
    for directory in directories:
        try:
            relative = directory.relative_to(root).as_posix()
        except ValueError:
            relative = directory.as_posix()
        for found in check_directory_naming(relative):
            if directory.name in flagged:
                continue
            flagged.add(directory.name)
            errors.append(found)
        if "components" in directory.parts[:-1]:
            errors.extend(check_component_structure(directory))
    return errors


def validate_component_entry_files(files: Iterable[Tuple[str, str]]) -> List[Violation]:
    """Check component ``index.tsx`` files, which the per-file battery skips."""

    errors: List[Violation] = []
    for file_path, content in files:
        if _basename(file_path) == "index.tsx":
            errors.extend(check_component_function_name_match(content, file_path))
    return errors
