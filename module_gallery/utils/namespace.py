"""
Namespacing helpers for module ids.

Every input, output and control created by a module is scoped under the
module's root id so several instances of the same module can live on one page:

    ns("whiz", "go_1_2")        -> "whiz/go_1_2"
    Namespace("whiz")("wizard") -> "whiz/wizard"
    split_id("app/whiz/go_1_2") -> ("app/whiz", "go_1_2")
"""
from typing import Optional, Tuple

SEP = "/"


def _check_name(name) -> str:
    if not isinstance(name, str):
        raise TypeError(f"id parts must be strings, got {type(name).__name__}")
    if not name:
        raise ValueError("id parts must not be empty")
    if SEP in name:
        raise ValueError(f"local name {name!r} must not contain {SEP!r}")
    return name


def ns(root: Optional[str], *names: str) -> str:
    """Scope `names` under `root`. A `None` root leaves the names unscoped."""
    local = SEP.join(_check_name(name) for name in names)
    if root is None:
        return local
    if not isinstance(root, str):
        raise TypeError(f"root id must be a string, got {type(root).__name__}")
    if not root or root.startswith(SEP) or root.endswith(SEP):
        raise ValueError(f"invalid root id {root!r}")
    return f"{root}{SEP}{local}" if local else root


def split_id(full_id: str) -> Tuple[str, str]:
    """Split a scoped id into (root, local name)."""
    root, sep, local = full_id.rpartition(SEP)
    if not sep or not root or not local:
        raise ValueError(f"{full_id!r} is not a namespaced id")
    return root, local


class Namespace:
    """Callable id factory bound to one module root."""

    def __init__(self, root: str):
        # validate once so later calls only check the local name
        ns(root)
        self.root = root

    def __call__(self, *names: str) -> str:
        return ns(self.root, *names)

    def child(self, name: str) -> "Namespace":
        return Namespace(self(name))

    def __repr__(self):
        return f"<Namespace({self.root!r})>"
