# cppmconf

Read the TOML manifest of a C++ project into typed Python objects.

`cppmconf.config.Config` turns the manifest's tables (`package`, `cmake`,
`hunter`, `workspace`, `features`, `dependencies`, `dev-dependencies`, `lib`,
`bin`, `example`, `tests`, `benchmark`, `profile` and `target`) into
dataclasses from `cppmconf.model`, fills in defaults for fields that are
left out, and rejects keys that the `package`, `cmake`, `hunter`,
`workspace` and `target` tables do not allow.

## Installing

    pip install .

For running the test suite:

    pip install ".[test]"
    pytest

## Loading a manifest

```python
from cppmconf.config import Config

config = Config.loads("""
[package]
name = "hello"

[dependencies]
fmt = "7.1.3"
""")

print(config.package.name)                 # hello
print(config.package.version)              # 0.0.1 (default)
print(config.cmake.version)                # 3.12 (default)
print(config.dependencies["fmt"].version)  # 7.1.3
```

`Config.from_data` accepts an already parsed mapping instead of TOML text.
Invalid TOML, missing required fields, values of the wrong type, unknown
enum values and disallowed keys all raise `cppmconf.model.ConfigError`
(a subclass of `ValueError`).

Some details of the model:

- A dependency may be given as a plain version string or as a table with
  `version`, `type`, `repo`, `link` (case-insensitive), `feature-map`,
  `features`, `path`, `git`, `branch`, `url` and more.
- A `Feature` whose key starts with `$` is a CMake flag
  (`FeatureType.CMAKE_FLAG`) with the value `"OFF"`.
- Build targets (`CppkgLib`, `CppkgBin`, `CppkgExample`, `CppkgTest`) read
  their `type` case-insensitively with `_` treated as `-`, e.g.
  `header_only` becomes `CppkgTypeDetail.HEADER_ONLY`.

## Project directories

`cppmconf.config.ProjectPaths.make(root)` derives `build`, `cmake`,
`src` (as `source`), `include` and `thirdparty` beneath the root.
`Config.path` is left as `None` by `loads` and `from_data`; set it
yourself if you need it.

## Helpers

- `cppmconf.strutil`: `quot`, `str_cut`, `has_str`, `split`, `accumulate`
  and `hash_string` (a 64-bit string hash), small tools for building
  CMake text.
- `cppmconf.system`: `platform_name`, `install_prefix`, `compiler_name`,
  and `panic(value, message)`, which returns `value` or, when it is
  `None` or `False`, writes `message` to stderr and raises `SystemExit(1)`.
- `cppmconf.tomlutil`: `find_recursive` looks up a dotted key such as
  `"package.name"` in nested tables, raising `KeyError` for a missing part.

## What this package does not do

It only reads and models manifests. It does not generate CMake files,
download or install dependencies, search package repositories, or provide
a command-line tool.