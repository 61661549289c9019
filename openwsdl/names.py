from typing import Any, Optional

from lxml import etree


# FIXME: dropping the prefix ignores which namespace it is bound to, so two
# types sharing a local name in different namespaces collide.
def split_namespace(value: str) -> str:
    """
    Returns the local part of a qualified name such as 'tns:Person'.
    Everything up to and including the first colon is removed.
    """
    _, sep, local = value.partition(":")
    return local if sep else value


def local_name(node: Any) -> Optional[str]:
    """
    Returns the namespace-free tag of an element node, or None for comments
    and processing instructions.
    """
    if not isinstance(node.tag, str):
        return None
    return etree.QName(node).localname
