import json

from standards_checker.config import ZoneSettings
from standards_checker.project import ProjectAnalyzer, detect_project_type, is_monorepo


def _package(path, **data):
    path.mkdir(parents=True, exist_ok=True)
    (path / "package.json").write_text(json.dumps(data), encoding="utf-8")


def test_project_type_from_dependencies(tmp_path):
    _package(tmp_path / "web", dependencies={"next": "14.0.0", "react": "18.0.0"})
    _package(tmp_path / "spa", dependencies={"react": "18.0.0"})
    _package(tmp_path / "admin", devDependencies={"@angular/core": "17.0.0"})
    _package(tmp_path / "lib", main="index.js")

    assert detect_project_type(tmp_path / "web") == "next"
    assert detect_project_type(tmp_path / "spa") == "react"
    assert detect_project_type(tmp_path / "admin") == "angular"
    assert detect_project_type(tmp_path / "lib") == "node"


def test_project_type_from_layout(tmp_path):
    (tmp_path / "pages").mkdir()

    assert detect_project_type(tmp_path) == "next"
    assert detect_project_type(tmp_path / "pages") == "generic"


def test_single_project_scans_root_zone(tmp_path):
    _package(tmp_path, dependencies={"react": "18.0.0"})

    info = ProjectAnalyzer(tmp_path).analyze()

    assert not info.is_monorepo
    assert info.type == "react"
    assert [zone.name for zone in info.zones] == ["."]
    assert info.zones[0].path == tmp_path


def test_monorepo_zones_from_apps_and_packages(tmp_path):
    _package(tmp_path / "apps" / "web", dependencies={"next": "14.0.0"})
    (tmp_path / "apps" / "admin").mkdir(parents=True)
    (tmp_path / "packages" / "ui").mkdir(parents=True)

    assert is_monorepo(tmp_path)
    assert [zone.name for zone in ProjectAnalyzer(tmp_path).analyze().zones] == ["apps/admin", "apps/web"]

    info = ProjectAnalyzer(tmp_path).analyze(ZoneSettings(include_packages=True))

    assert [zone.name for zone in info.zones] == ["apps/admin", "apps/web", "packages/ui"]
    assert info.zone("apps/web").type == "next"


def test_workspace_zones_support_globs(tmp_path):
    _package(tmp_path, workspaces=["services/*", "tools/cli"])
    (tmp_path / "services" / "api").mkdir(parents=True)
    (tmp_path / "tools" / "cli").mkdir(parents=True)

    info = ProjectAnalyzer(tmp_path).analyze()

    assert info.is_monorepo
    assert [zone.name for zone in info.zones] == ["services/api", "tools/cli"]


def test_custom_zones_skip_missing_directories(tmp_path, caplog):
    (tmp_path / "frontend").mkdir()

    info = ProjectAnalyzer(tmp_path).analyze(ZoneSettings(custom_zones=("frontend", "missing")))

    assert [zone.name for zone in info.zones] == ["frontend"]
    assert "Custom zone missing does not exist" in caplog.text


def test_only_zone_restricts_by_prefix(tmp_path):
    for name in ("apps/web", "apps/admin", "libs/shared"):
        (tmp_path / name).mkdir(parents=True)

    info = ProjectAnalyzer(tmp_path).analyze(ZoneSettings(only_zone="apps/web"))

    assert [zone.name for zone in info.zones] == ["apps/web"]


def test_only_zone_falls_back_to_directory(tmp_path):
    (tmp_path / "src" / "feature").mkdir(parents=True)

    info = ProjectAnalyzer(tmp_path).analyze(ZoneSettings(only_zone="src/feature"))

    assert [zone.name for zone in info.zones] == ["src/feature"]
