"""Path normalization and lookup against the virtual tree."""

from morpheus_shell.vfs.nodes import Directory, File, Node
from morpheus_shell.vfs.tree import get_root

# An absolute path as a sequence of segment names; the empty tuple is the root.
PathSegments = tuple[str, ...]

ROOT_PATH: PathSegments = ()


def normalize(target: str, base: PathSegments) -> PathSegments:
    """
    Normalizes a user-supplied path string into an absolute segment tuple.

    Relative targets are applied on top of `base`; a leading slash starts from
    the root. `.` is skipped and `..` drops the last segment, stopping at the
    root instead of failing. Repeated slashes collapse.

    Args:
        target: The path string typed by the user.
        base: The current working path.

    Returns:
        The resulting absolute path. It is not checked for existence.
    """
    if not target.strip() or target == ".":
        return tuple(base)

    segments = [] if target.startswith("/") else list(base)
    for segment in target.split("/"):
        match segment:
            case "" | ".":
                continue
            case "..":
                if segments:
                    segments.pop()
            case _:
                segments.append(segment)

    return tuple(segments)


def resolve(path: PathSegments, root: Directory | None = None) -> Node | None:
    """
    Walks the tree from the root and returns the node at `path`.

    Returns None when a segment is missing or when a file sits in the middle
    of the path. Never raises.
    """
    node: Node = root if root is not None else get_root()
    for segment in path:
        match node:
            case Directory():
                child = node.get_child(segment)
                if child is None:
                    return None
                node = child
            case File():
                return None
    return node


def format_path(path: PathSegments) -> str:
    """Formats a segment tuple as `/seg1/seg2`; the root is `/`."""
    if not path:
        return "/"
    return "/" + "/".join(path)
