"""The whole project manifest and the standard project directory layout."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from cppmconf.model import (
    CMake,
    ConfigError,
    CppkgBin,
    CppkgExample,
    CppkgLib,
    CppkgTest,
    Dependency,
    Feature,
    Hunter,
    Package,
    Profile,
    Target,
    Workspace,
    _feature_list,
    _MISSING,
    _Table,
    dependency_map,
)


@dataclass(frozen=True)
class ProjectPaths:
    """Directories of a project, all derived from its root."""

    root: Path
    build: Path
    cmake: Path
    source: Path
    include: Path
    thirdparty: Path

    @classmethod
    def make(cls, root: str | Path) -> ProjectPaths:
        base = Path(root)
        return cls(
            root=base,
            build=base / "build",
            cmake=base / "cmake",
            source=base / "src",
            include=base / "include",
            thirdparty=base / "thirdparty",
        )


@dataclass
class Config:
    package: Package
    cmake: CMake = field(default_factory=CMake)
    hunter: Hunter | None = None
    workspace: Workspace | None = None
    features: dict[str, list[Feature]] = field(default_factory=dict)
    dependencies: dict[str, Dependency] = field(default_factory=dict)
    dev_dependencies: dict[str, Dependency] = field(default_factory=dict)
    lib: CppkgLib | None = None
    bins: list[CppkgBin] = field(default_factory=list)
    examples: list[CppkgExample] = field(default_factory=list)
    tests: list[CppkgTest] = field(default_factory=list)
    benchmarks: list[CppkgTest] = field(default_factory=list)
    profile: dict[str, Profile] = field(default_factory=dict)
    target: dict[str, Target] = field(default_factory=dict)
    path: ProjectPaths | None = None

    @classmethod
    def from_data(cls, data: Any) -> Config:
        """Build a configuration from an already parsed manifest table."""
        table = _Table(data, "config")
        package = table.raw("package")
        if package is _MISSING:
            raise ConfigError("config: missing required field 'package'")
        cmake = table.raw("cmake")
        hunter = table.raw("hunter")
        workspace = table.raw("workspace")
        lib = table.raw("lib")
        return cls(
            package=Package.from_data(package),
            cmake=CMake() if cmake is _MISSING else CMake.from_data(cmake),
            hunter=None if hunter is _MISSING else Hunter.from_data(hunter),
            workspace=None if workspace is _MISSING else Workspace.from_data(workspace),
            features=table.table_map(
                "features", lambda item, key: _feature_list(item, f"features.{key}")
            ),
            dependencies=dependency_map(table, "dependencies"),
            dev_dependencies=dependency_map(table, "dev-dependencies"),
            lib=None if lib is _MISSING else CppkgLib.from_data(lib),
            bins=table.table_list("bin", CppkgBin.from_data),
            examples=table.table_list("example", CppkgExample.from_data),
            benchmarks=table.table_list("benchmark", CppkgTest.from_data),
            tests=table.table_list("tests", CppkgTest.from_data),
            profile=table.table_map("profile", lambda item, _k: Profile.from_data(item)),
            target=table.table_map("target", lambda item, _k: Target.from_data(item)),
        )

    @classmethod
    def loads(cls, text: str) -> Config:
        """Parse a manifest given as TOML text."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML: {exc}") from exc
        return cls.from_data(data)