"""
Path helpers for document identities.

Document identities are vault-relative, forward-slash separated paths
such as "projects/alpha/plan.md".
"""

from collections.abc import Iterable


def normalize_path(path: str) -> str:
    """
    Normalize a document path to its canonical identity.

    Backslashes become forward slashes and leading "./" or "/" is dropped.

    Args:
        path: Raw path

    Returns:
        Normalized path
    """
    normalized = path.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized.lstrip("/")


def folder_segments(path: str) -> list[str]:
    """
    Get the folder segments of a path (everything but the file name).

    Args:
        path: Document path

    Returns:
        List of folder names, outermost first
    """
    return [segment for segment in normalize_path(path).split("/")[:-1] if segment]


def is_in_excluded_folder(path: str, exclude_folders: Iterable[str]) -> bool:
    """
    Check whether a document lives in an excluded folder.

    An entry matches when it equals any folder segment of the path, or when
    it is a multi-segment prefix ("archive/old") the path lies under.
    Blank entries never match.

    Args:
        path: Document path
        exclude_folders: Folder names or path prefixes

    Returns:
        True if the document is excluded
    """
    normalized = normalize_path(path)
    segments = folder_segments(normalized)

    for entry in exclude_folders:
        folder = normalize_path(entry).strip("/")
        if not folder:
            continue
        if "/" in folder:
            if normalized.startswith(folder + "/"):
                return True
        elif folder in segments:
            return True
    return False
