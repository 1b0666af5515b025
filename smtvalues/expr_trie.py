"""A trie keyed by sequences of terms, used to cache results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Iterable, Optional

__all__ = ["ExprTrie"]


@dataclass
class ExprTrie:
    """A node holding optional data and children keyed by terms."""

    children: dict[Hashable, "ExprTrie"] = field(default_factory=dict)
    data: Optional[Any] = None

    def get(self, children: Iterable[Hashable]) -> "ExprTrie":
        """The node for the key sequence, created along the way if missing."""
        node = self
        for key in children:
            node = node.children.setdefault(key, ExprTrie())
        return node

    def remove(self, children: Iterable[Hashable]) -> None:
        """Clear the data at the key sequence and prune its unshared branch.

        Raises KeyError if the sequence is not in the trie.
        """
        node = self
        prune_from: Optional[ExprTrie] = None
        prune_key: Hashable = None
        for key in children:
            try:
                child = node.children[key]
            except KeyError:
                raise KeyError(f"no trie entry for {key!r}") from None
            if prune_from is None:
                prune_from, prune_key = node, key
            if len(node.children) > 1:
                prune_from = None
            node = child
        if prune_from is not None:
            del prune_from.children[prune_key]
        node.data = None