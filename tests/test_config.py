from pathlib import Path

import pytest

from cppmconf.config import Config, ProjectPaths
from cppmconf.model import ConfigError, CppkgType, CppkgTypeDetail, LinkType

MANIFEST = """
[package]
name = "demo"
version = "1.0.0"

[cmake]
include = ["extra.cmake"]

[hunter]
use = true

[workspace]
member = ["libs/a"]

[lib]
name = "demo"
type = "header-only"

[[bin]]
name = "demo-cli"
source = ["src/main.cpp"]

[[tests]]
name = "demo-test"

[dependencies]
fmt = "7.1.3"
boost = { version = "1.75", link = "public", repo = "hunter" }

[dev-dependencies]
gtest = "1.10.0"

[features]
default = ["ssl"]

[profile.release.compiler]
gcc = "10"

[target.linux.dependencies]
pthread = { version = "latest", repo = "system" }
"""


def test_project_paths():
    paths = ProjectPaths.make("/proj")
    assert paths.root == Path("/proj")
    assert paths.build == Path("/proj") / "build"
    assert paths.source == Path("/proj") / "src"
    assert paths.include == Path("/proj") / "include"
    assert paths.thirdparty == Path("/proj") / "thirdparty"
    assert paths.cmake.parent == paths.root


def test_loads_full_manifest():
    cfg = Config.loads(MANIFEST)
    assert cfg.package.name == "demo"
    assert cfg.cmake.version == "3.12"
    assert cfg.cmake.include == ["extra.cmake"]
    assert cfg.hunter is not None and cfg.hunter.use is True
    assert cfg.workspace.member == ["libs/a"]
    assert cfg.lib.detail is CppkgTypeDetail.HEADER_ONLY
    assert cfg.bins[0].kind is CppkgType.BIN
    assert cfg.bins[0].source == ["src/main.cpp"]
    assert cfg.tests[0].kind is CppkgType.TEST
    assert set(cfg.dependencies) == {"fmt", "boost"}
    assert cfg.dependencies["boost"].link is LinkType.PUBLIC
    assert cfg.dev_dependencies["gtest"].name == "gtest"
    assert cfg.features["default"][0].key == "ssl"
    assert cfg.profile["release"].compiler["gcc"].version == "10"
    assert cfg.target["linux"].dependencies["pthread"].version == "latest"


def test_minimal_manifest_defaults():
    cfg = Config.loads('[package]\nname = "x"\n')
    assert cfg.hunter is None
    assert cfg.workspace is None
    assert cfg.lib is None
    assert cfg.bins == [] and cfg.examples == [] and cfg.benchmarks == []
    assert cfg.dependencies == {}
    assert cfg.cmake.version == "3.12"


def test_from_data_matches_loads():
    data = {"package": {"name": "x"}, "dependencies": {"fmt": "7.0"}}
    assert Config.from_data(data) == Config.loads('[package]\nname = "x"\n[dependencies]\nfmt = "7.0"\n')


def test_missing_package():
    with pytest.raises(ConfigError, match="package"):
        Config.loads('[cmake]\nversion = "3.20"\n')


def test_invalid_toml():
    with pytest.raises(ConfigError):
        Config.loads("[package\nname=")


def test_nested_error_propagates():
    with pytest.raises(ConfigError):
        Config.loads('[package]\nname = "x"\n[cmake]\nunknown = 1\n')