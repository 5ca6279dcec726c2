"""Data model of a project manifest: packages, targets and dependencies."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar

E = TypeVar("E", bound=enum.Enum)

_MISSING = object()


class ConfigError(ValueError):
    """Raised when manifest data is missing a field or has a wrong value."""


class FeatureType(enum.Enum):
    CMAKE_FLAG = "cmake_flag"
    REMOTE = "remote"


class CppkgType(enum.Enum):
    BIN = "bin"
    LIB = "lib"
    TEST = "test"
    EXAMPLE = "example"
    CMAKE = "cmake"


class CppkgTypeDetail(enum.Enum):
    STATIC = "static"
    BINARY = "binary"
    SHARED = "shared"
    HEADER_ONLY = "header-only"


class LinkType(enum.Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    INTERFACE = "interface"


class RepoType(enum.Enum):
    CPPKG = "cppkg"
    HUNTER = "hunter"
    SYSTEM = "system"
    VCPKG = "vcpkg"
    WORKSPACE = "workspace"


class CxxStandard(enum.IntEnum):
    CPP_98 = 98
    CPP_11 = 11
    CPP_14 = 14
    CPP_17 = 17
    CPP_20 = 20
    CPP_23 = 23


class _Table:
    """Typed access to one manifest table, remembering which keys were read."""

    def __init__(self, data: Any, where: str) -> None:
        if not isinstance(data, Mapping):
            raise ConfigError(f"{where}: expected a table")
        self.data = data
        self.where = where
        self.used: set[str] = set()

    def _take(self, key: str) -> Any:
        self.used.add(key)
        return self.data.get(key, _MISSING)

    def string(self, key: str, default: Any = _MISSING) -> str:
        value = self._take(key)
        if value is _MISSING:
            if default is _MISSING:
                raise ConfigError(f"{self.where}: missing required field {key!r}")
            return default
        if not isinstance(value, str):
            raise ConfigError(f"{self.where}.{key}: expected a string")
        return value

    def optional_string(self, key: str) -> str | None:
        return self.string(key, None)

    def boolean(self, key: str, default: bool) -> bool:
        value = self._take(key)
        if value is _MISSING:
            return default
        if not isinstance(value, bool):
            raise ConfigError(f"{self.where}.{key}: expected a boolean")
        return value

    def strings(self, key: str) -> list[str]:
        value = self._take(key)
        if value is _MISSING:
            return []
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"{self.where}.{key}: expected a list of strings")
        return list(value)

    def choice(self, key: str, enum_cls: type[E], default: E, fold_case: bool = False) -> E:
        value = self._take(key)
        if value is _MISSING:
            return default
        if not isinstance(value, str):
            raise ConfigError(f"{self.where}.{key}: expected a string")
        text = value.lower() if fold_case else value
        try:
            return enum_cls(text)
        except ValueError:
            allowed = ", ".join(str(m.value) for m in enum_cls)
            raise ConfigError(
                f"{self.where}.{key}: {value!r} is not one of {allowed}"
            ) from None

    def raw(self, key: str) -> Any:
        return self._take(key)

    def table_map(self, key: str, parse) -> dict[str, Any]:
        value = self._take(key)
        if value is _MISSING:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigError(f"{self.where}.{key}: expected a table")
        return {name: parse(item, name) for name, item in value.items()}

    def table_list(self, key: str, parse) -> list[Any]:
        value = self._take(key)
        if value is _MISSING:
            return []
        if not isinstance(value, list):
            raise ConfigError(f"{self.where}.{key}: expected an array")
        return [parse(item) for item in value]

    def no_remain(self) -> None:
        extra = sorted(set(self.data) - self.used)
        if extra:
            raise ConfigError(f"{self.where}: unknown field(s): {', '.join(extra)}")


def _feature_list(value: Any, where: str) -> list[Feature]:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: expected an array of features")
    return [Feature.from_data(item) for item in value]


@dataclass
class Feature:
    """A feature switch; a key starting with ``$`` is a CMake flag."""

    key: str = ""
    value: str = ""
    type: FeatureType = FeatureType.REMOTE

    def __post_init__(self) -> None:
        if self.key.startswith("$"):
            self.type = FeatureType.CMAKE_FLAG
            self.value = "OFF"

    @classmethod
    def from_data(cls, data: Any) -> Feature:
        if isinstance(data, str):
            return cls(key=data)
        table = _Table(data, "feature")
        return cls(key=table.string("key"))


@dataclass
class Compiler:
    version: str = ""
    option: str = ""

    @classmethod
    def from_data(cls, data: Any) -> Compiler:
        if isinstance(data, str):
            return cls(version=data)
        table = _Table(data, "compiler")
        return cls(version=table.string("version"), option=table.string("option"))


@dataclass
class CMake:
    version: str = "3.12"
    toolchain: str | None = None
    include: list[str] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Any) -> CMake:
        table = _Table(data, "cmake")
        result = cls(
            version=table.string("version", "3.12"),
            toolchain=table.optional_string("toolchain"),
            include=table.strings("include"),
        )
        table.no_remain()
        return result


@dataclass
class Hunter:
    """Hunter package manager settings; ``url`` names the archive to fetch."""

    url: str = ""
    sha1: str = "64024b7b95b4c86d50ae05b926814448c93a70a0"
    use: bool = False

    @classmethod
    def from_data(cls, data: Any) -> Hunter:
        table = _Table(data, "hunter")
        defaults = cls()
        result = cls(
            url=table.string("url", defaults.url),
            sha1=table.string("sha1", defaults.sha1),
            use=table.boolean("use", defaults.use),
        )
        table.no_remain()
        return result


@dataclass
class Package:
    name: str
    version: str = "0.0.1"
    tool_version: str = "0.0.13"
    description: str = ""
    standard: str = "17"
    git_repo: str | None = None
    with_vcpkg: bool = False
    unity_build: bool = False

    @classmethod
    def from_data(cls, data: Any) -> Package:
        table = _Table(data, "package")
        result = cls(
            name=table.string("name"),
            version=table.string("version", "0.0.1"),
            tool_version=table.string("tool-version", "0.0.13"),
            description=table.string("description", ""),
            standard=table.string("standard", "17"),
            with_vcpkg=table.boolean("vcpkg", False),
            unity_build=table.boolean("unity", False),
            git_repo=table.optional_string("git"),
        )
        table.no_remain()
        return result


@dataclass
class Profile:
    package: dict[str, Profile] = field(default_factory=dict)
    compiler: dict[str, Compiler] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Any) -> Profile:
        table = _Table(data, "profile")
        return cls(
            package=table.table_map("package", lambda item, _name: cls.from_data(item)),
            compiler=table.table_map(
                "compiler", lambda item, _name: Compiler.from_data(item)
            ),
        )


@dataclass
class Workspace:
    member: list[str] = field(default_factory=list)

    @classmethod
    def from_data(cls, data: Any) -> Workspace:
        table = _Table(data, "workspace")
        result = cls(member=table.strings("member"))
        table.no_remain()
        return result


@dataclass
class Cppkg:
    """A build target described by the manifest."""

    DEFAULT_KIND: ClassVar[CppkgType] = CppkgType.LIB
    DEFAULT_DETAIL: ClassVar[CppkgTypeDetail] = CppkgTypeDetail.STATIC

    name: str
    kind: CppkgType = CppkgType.LIB
    detail: CppkgTypeDetail = CppkgTypeDetail.STATIC
    namespace: str | None = None
    install: bool = True
    source: list[str] = field(default_factory=list)
    exclude_var: str = ""
    exclude: bool = False

    @classmethod
    def from_data(cls, data: Any) -> Cppkg:
        table = _Table(data, cls.__name__.lower())
        detail_text = table.raw("type")
        if isinstance(detail_text, str):
            detail_text = detail_text.replace("_", "-")
        detail_table = _Table({} if detail_text is _MISSING else {"type": detail_text},
                              table.where)
        return cls(
            name=table.string("name"),
            namespace=table.optional_string("namespace"),
            install=table.boolean("install", True),
            source=table.strings("source"),
            exclude=table.boolean("flag", False),
            kind=table.choice("cppkg_type", CppkgType, cls.DEFAULT_KIND),
            detail=detail_table.choice(
                "type", CppkgTypeDetail, cls.DEFAULT_DETAIL, fold_case=True
            ),
        )


@dataclass
class CppkgLib(Cppkg):
    DEFAULT_KIND: ClassVar[CppkgType] = CppkgType.LIB
    DEFAULT_DETAIL: ClassVar[CppkgTypeDetail] = CppkgTypeDetail.STATIC


@dataclass
class CppkgBin(Cppkg):
    DEFAULT_KIND: ClassVar[CppkgType] = CppkgType.BIN
    DEFAULT_DETAIL: ClassVar[CppkgTypeDetail] = CppkgTypeDetail.BINARY


@dataclass
class CppkgExample(Cppkg):
    DEFAULT_KIND: ClassVar[CppkgType] = CppkgType.EXAMPLE
    DEFAULT_DETAIL: ClassVar[CppkgTypeDetail] = CppkgTypeDetail.BINARY


@dataclass
class CppkgTest(Cppkg):
    DEFAULT_KIND: ClassVar[CppkgType] = CppkgType.TEST
    DEFAULT_DETAIL: ClassVar[CppkgTypeDetail] = CppkgTypeDetail.BINARY


@dataclass
class Dependency:
    name: str
    version: str
    kind: CppkgType = CppkgType.LIB
    link: LinkType = LinkType.PRIVATE
    repo: RepoType = RepoType.CPPKG
    description: str = ""
    features: dict[str, list[Feature]] = field(default_factory=dict)
    default_feature: list[Feature] = field(default_factory=list)
    components: str | None = None
    path: str | None = None
    git: str | None = None
    branch: str | None = None
    url: str | None = None
    sha256: str | None = None
    helper: str | None = None
    flags: str | None = None
    custom: bool = False
    no_cmake: bool = False
    optional: bool = False
    default_features_flag: bool = True
    module: str | None = None

    @classmethod
    def from_data(cls, data: Any, name: str) -> Dependency:
        if isinstance(data, str):
            return cls(name=name, version=data)
        where = f"dependency {name!r}"
        table = _Table(data, where)
        default_feature = table.raw("features")
        return cls(
            name=name,
            version=table.string("version"),
            description=table.string("description", ""),
            kind=table.choice("type", CppkgType, CppkgType.LIB),
            repo=table.choice("repo", RepoType, RepoType.CPPKG),
            link=table.choice("link", LinkType, LinkType.PRIVATE, fold_case=True),
            module=table.optional_string("module"),
            features=table.table_map(
                "feature-map", lambda item, key: _feature_list(item, f"{where}.{key}")
            ),
            default_feature=(
                [] if default_feature is _MISSING
                else _feature_list(default_feature, f"{where}.features")
            ),
            default_features_flag=table.boolean("default_features", True),
            custom=table.boolean("custom", False),
            no_cmake=table.boolean("no_module", False),
            optional=table.boolean("optional", False),
            components=table.optional_string("components"),
            path=table.optional_string("path"),
            git=table.optional_string("git"),
            branch=table.optional_string("branch"),
            url=table.optional_string("url"),
            sha256=table.optional_string("sha256"),
            helper=table.optional_string("helper"),
            flags=table.optional_string("flags"),
        )


def dependency_map(table: _Table, key: str) -> dict[str, Dependency]:
    """Read a table of dependencies keyed by name."""
    return table.table_map(key, Dependency.from_data)


@dataclass
class Target:
    dependencies: dict[str, Dependency] = field(default_factory=dict)
    dev_dependencies: dict[str, Dependency] = field(default_factory=dict)

    @classmethod
    def from_data(cls, data: Any) -> Target:
        table = _Table(data, "target")
        result = cls(
            dependencies=dependency_map(table, "dependencies"),
            dev_dependencies=dependency_map(table, "dev-dependencies"),
        )
        table.no_remain()
        return result