from standards_checker.utils.code import is_ignored, iter_code_files, iter_directories, load_gitignore_patterns


def _touch(root, relative, content=""):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def _relative(root, paths):
    return sorted(path.relative_to(root).as_posix() for path in paths)


def test_iter_code_files_filters_extensions_tests_and_defaults(tmp_path):
    for name in (
        "src/App.tsx",
        "src/utils/format.ts",
        "src/styles.css",
        "src/App.test.tsx",
        "src/api.spec.ts",
        "src/.hidden.ts",
        "node_modules/react/index.js",
        "dist/bundle.js",
        ".next/server.js",
        "src/__tests__/helpers.ts",
    ):
        _touch(tmp_path, name)

    assert _relative(tmp_path, iter_code_files(tmp_path)) == ["src/App.tsx", "src/utils/format.ts"]


def test_iter_code_files_honours_extra_patterns_and_extensions(tmp_path):
    for name in ("src/App.tsx", "src/generated/api.ts", "scripts/build.js"):
        _touch(tmp_path, name)

    files = iter_code_files(tmp_path, extensions=(".ts", ".tsx"), ignore_patterns=["generated/"])

    assert _relative(tmp_path, files) == ["src/App.tsx"]


def test_gitignore_patterns(tmp_path):
    _touch(tmp_path, ".gitignore", "# build output\nout/\n\n*.gen.ts\n!keep.gen.ts\n")

    patterns = load_gitignore_patterns(tmp_path)

    assert patterns == ["out/", "*.gen.ts", "!keep.gen.ts"]
    assert is_ignored("out/index.js", patterns)
    assert is_ignored("src/schema.gen.ts", patterns)
    assert not is_ignored("src/keep.ts", patterns)


def test_missing_gitignore(tmp_path):
    assert load_gitignore_patterns(tmp_path) == []


def test_iter_directories_prunes_ignored(tmp_path):
    for name in ("src/components/Button/index.tsx", "node_modules/pkg/index.js", ".git/HEAD"):
        _touch(tmp_path, name)

    assert _relative(tmp_path, iter_directories(tmp_path)) == ["src", "src/components", "src/components/Button"]


def test_root_gitignore_applies_inside_monorepo_zone(tmp_path):
    _touch(tmp_path, ".gitignore", "apps/web/src/generated/\n")
    _touch(tmp_path, "apps/web/src/ok.ts")
    _touch(tmp_path, "apps/web/src/generated/api.ts")
    zone = tmp_path / "apps" / "web"
    gitignore = load_gitignore_patterns(tmp_path)

    files = iter_code_files(zone, gitignore=gitignore, project_root=tmp_path)
    directories = iter_directories(zone, gitignore=gitignore, project_root=tmp_path)

    assert _relative(zone, files) == ["src/ok.ts"]
    assert _relative(zone, directories) == ["src"]


def test_zone_ignore_patterns_stay_relative_to_zone(tmp_path):
    _touch(tmp_path, "apps/web/generated/api.ts")
    _touch(tmp_path, "apps/web/src/ok.ts")
    zone = tmp_path / "apps" / "web"

    files = iter_code_files(zone, ignore_patterns=["generated/"], project_root=tmp_path)

    assert _relative(zone, files) == ["src/ok.ts"]
