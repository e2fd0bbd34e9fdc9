"""
Path helpers for OPC part names.

All functions are pure string operations on ``/``-separated part names;
nothing here touches the real file system.
"""

from __future__ import annotations

from ..constants import CONTENT_TYPES_PART, ROOT_RELS_PATH

RELS_DIR = "_rels"
RELS_SUFFIX = ".rels"


def normalize_path(path: str) -> str:
    """
    Lexically normalize a part path.

    Empty and ``.`` segments are dropped, ``..`` removes the previous
    segment (and is ignored at the root).

    Args:
        path: Part path, absolute or relative

    Returns:
        Absolute normalized path, always starting with ``/``
    """
    stack = []
    for segment in path.split("/"):
        if not segment or segment == ".":
            continue
        if segment == "..":
            if stack:
                stack.pop()
            continue
        stack.append(segment)
    return "/" + "/".join(stack)


def ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def trim_leading_slash(path: str) -> str:
    return path[1:] if path.startswith("/") else path


def canonical_key(path: str) -> str:
    """
    Get the lookup key for a part path.

    The empty path denotes the package root and maps to ``""``.
    """
    if not path:
        return ""
    return normalize_path(ensure_leading_slash(path)).lower()


def dir_name(path: str) -> str:
    """Parent directory of ``path`` (``/`` for top-level parts)."""
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    index = path.rfind("/")
    if index <= 0:
        return "/"
    return path[:index]


def base_name(path: str) -> str:
    if len(path) > 1 and path.endswith("/"):
        path = path[:-1]
    return path[path.rfind("/") + 1:]


def extension_of(path: str) -> str:
    """
    Get the lower-cased extension of a part path, without the dot.

    Dot-files such as ``.rels`` have no extension in the OPC sense of
    ``base.ext``; for them ``""`` is returned.
    """
    base = base_name(path)
    index = base.rfind(".")
    if index <= 0:
        return ""
    return base[index + 1:].lower()


def rels_path_for(source: str) -> str:
    """
    Get the relationship document path for a source part.

    Example: ``/aasx/Spec.xml`` -> ``/aasx/_rels/Spec.xml.rels``;
    the package root (``""``) maps to ``/_rels/.rels``. The case of
    ``source`` is kept.
    """
    if not source:
        return ROOT_RELS_PATH

    path = normalize_path(source)
    directory = dir_name(path)
    base = base_name(path)
    if directory == "/":
        return f"/{RELS_DIR}/{base}{RELS_SUFFIX}"
    return f"{directory}/{RELS_DIR}/{base}{RELS_SUFFIX}"


def source_from_rels_path(rels_path: str) -> str:
    """
    Recover the source part path from a relationship document path.

    Example: ``aasx/_rels/spec.xml.rels`` -> ``/aasx/spec.xml``;
    ``_rels/.rels`` maps to the package root (``""``).
    """
    clean = trim_leading_slash(rels_path)
    if clean == f"{RELS_DIR}/{RELS_SUFFIX}":
        return ""

    directory = dir_name(ensure_leading_slash(clean))
    if directory == f"/{RELS_DIR}":
        directory = "/"
    elif directory.endswith(f"/{RELS_DIR}"):
        directory = directory[: -len(RELS_DIR) - 1]

    base = base_name(clean)
    if base.endswith(RELS_SUFFIX):
        base = base[: -len(RELS_SUFFIX)]

    if directory == "/":
        return f"/{base}"
    return f"{directory}/{base}"


def is_rels_path(name: str) -> bool:
    """Whether an archive entry name is a relationship document."""
    clean = ensure_leading_slash(name)
    return f"/{RELS_DIR}/" in clean and clean.endswith(RELS_SUFFIX)


def in_rels_dir(name: str) -> bool:
    return f"/{RELS_DIR}/" in ensure_leading_slash(name)


def is_reserved_name(path: str) -> bool:
    """
    Whether a part path collides with an entry the package format owns.

    That is ``/[Content_Types].xml`` (any case) and every name inside a
    ``_rels`` directory.
    """
    if canonical_key(path) == canonical_key(CONTENT_TYPES_PART):
        return True
    return in_rels_dir(path)


def resolve_target(source: str, target: str) -> str:
    """
    Resolve a relationship target against its source part.

    Args:
        source: Source part path (``""`` for the package root)
        target: Target as recorded in the relationship document

    Returns:
        Absolute target path; absolute targets are returned unchanged
    """
    target = target.replace("\\", "/")
    if target.startswith("/"):
        return target

    directory = dir_name(source) if source else "/"
    return normalize_path(f"{directory}/{target}")
