"""Host platform and compiler detection, plus a fatal-exit helper."""

from __future__ import annotations

import platform
import sys
from typing import TypeVar

T = TypeVar("T")


def platform_name() -> str:
    """Return the short name of the host platform, or ``""`` if unknown."""
    name = sys.platform
    if name.startswith(("win32", "cygwin", "msys")):
        return "windows"
    if name.startswith("android") or hasattr(sys, "getandroidapilevel"):
        return "android"
    if name.startswith("linux"):
        return "linux"
    # Darwin hosts are BSD-derived and report as such.
    if name.startswith(("darwin", "freebsd", "netbsd", "openbsd", "dragonfly")):
        return "bsd"
    if name.startswith("hp-ux"):
        return "hp-ux"
    if name.startswith("aix"):
        return "aix"
    if name.startswith("sunos"):
        return "solaris"
    return ""


def install_prefix(platform: str | None = None) -> str:
    """Return the default installation prefix for ``platform``."""
    if platform is None:
        platform = platform_name()
    if platform == "windows":
        return "C:/users/"
    return "/usr/local/"


def compiler_name() -> str:
    """Return the short name of the compiler the interpreter was built with."""
    description = platform.python_compiler()
    if description.startswith("MSC"):
        return "msvc"
    # Compilers speaking the GNU interface (clang, mingw) report as gcc.
    if description.startswith(("GCC", "Clang", "MinGW", "clang")):
        return "gcc"
    return ""


def panic(value: T, message: str) -> T:
    """Return ``value``, or print ``message`` to stderr and exit with status 1.

    ``None`` and ``False`` count as missing; any other value is returned.
    """
    if value is None or value is False:
        sys.stderr.write(message)
        sys.stderr.flush()
        raise SystemExit(1)
    return value