"""Function namespaces for templates: strings, math, paths, regexps, encoding and hashing, time, UUIDs, checks and I/O helpers."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "encoding",
    "iohelpers",
    "mathfuncs",
    "paths",
    "refuncs",
    "strfuncs",
    "timefuncs",
    "uuidfuncs",
    "values",
]