from __future__ import annotations

from pathlib import Path

import tomllib

import yakuake_session


def check_version(pyproject_path: Path = Path("pyproject.toml")) -> str:
    pyproject = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    project_version = pyproject.get("project", {}).get("version")
    if not isinstance(project_version, str) or not project_version:
        raise SystemExit("Could not find project.version in pyproject.toml")
    module_version = yakuake_session.__version__

    if project_version != module_version:
        raise SystemExit(
            "Version mismatch: pyproject.toml project.version="
            f"{project_version} != yakuake_session.__version__={module_version}"
        )
    return project_version


if __name__ == "__main__":
    print(f"Version check passed: {check_version()}")
