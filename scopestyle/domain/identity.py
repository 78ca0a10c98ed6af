"""
Component identity hashing.

Every component kind is keyed by a stable name string. The name is hashed with
BLAKE2b (not the builtin ``hash()``, which is salted per process) so that the
identity and the class-name prefix are the same on every run.
"""

import hashlib

from scopestyle.config import StyleConfig


def _digest(kind_name: str) -> bytes:
    return hashlib.blake2b(
        kind_name.encode("utf-8"), digest_size=StyleConfig.DIGEST_SIZE
    ).digest()


def identity_of(kind_name: str) -> int:
    """Returns the registry key for a component kind."""
    return int.from_bytes(_digest(kind_name), "big")


def prefix_of(kind_name: str) -> str:
    """Returns the uppercase hex prefix used to scope the kind's class names."""
    return format(identity_of(kind_name), "X")


def scoped_class_name(kind_name: str, local_name: str) -> str:
    """
    Builds the globally unique class name for ``local_name``.
    ``local_name`` is not validated; it must already be a valid CSS identifier.
    """
    return (
        f"{StyleConfig.CLASS_PREFIX}{prefix_of(kind_name)}"
        f"{StyleConfig.CLASS_SEPARATOR}{local_name}"
    )


def kind_name_of(cls: type) -> str:
    """Fully-qualified name of a class, e.g. 'app.widgets.Card'."""
    return f"{cls.__module__}.{cls.__qualname__}"
