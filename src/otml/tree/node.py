# src/otml/tree/node.py

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Type, TypeVar

from otml.conversion import from_text, to_text
from otml.core.exceptions import CastError, NotFound

T = TypeVar("T")

# Marks "no default given" on the defaulting accessors (None is a valid default).
_MISSING: Any = object()


@dataclass
class OTMLNode:
    """
    One element of an OTML tree.

    Attributes:
        tag: Key of a mapping entry; empty for sequence entries ("- value").
        value: Raw text payload. Typed access goes through read()/write().
        unique: When inserted under a parent, replaces any sibling with the
            same tag instead of sitting next to it.
        null: The node is logically absent ("~"). It stays in the child list,
            so index access still reaches it, but tag lookup and children()
            skip it.
        source: "<document source>:<line>" for parsed nodes, used in errors.

    The parent link is a weak reference: a parent owns its children, never
    the other way round. Detaching a node clears the link.

    Two nodes are equal when tag, value, flags and children (in order) are
    equal; source and parent are not compared.
    """

    tag: str = ""
    value: str = ""
    unique: bool = False
    null: bool = False
    source: str = field(default="", compare=False)
    _children: List["OTMLNode"] = field(default_factory=list, init=False, repr=False)
    _parent: Optional["weakref.ReferenceType[OTMLNode]"] = field(
        default=None, init=False, repr=False, compare=False
    )

    # ------------------------------------------------------------------ #
    # Factories
    # ------------------------------------------------------------------ #

    @classmethod
    def create(cls, tag: str = "", unique: bool = False) -> "OTMLNode":
        return cls(tag=tag, unique=unique)

    @classmethod
    def create_value(cls, tag: str, value: Any) -> "OTMLNode":
        """Create a keyed node holding ``value``; such nodes are always unique."""
        node = cls(tag=tag, unique=True)
        node.write(value)
        return node

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    @property
    def parent(self) -> Optional["OTMLNode"]:
        """The owning node, or None for a root or a detached node."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def size(self) -> int:
        """Physical child count, null children included."""
        return len(self._children)

    def has_tag(self) -> bool:
        return bool(self.tag)

    def has_value(self) -> bool:
        return bool(self.value) and not self.null

    def has_children(self) -> bool:
        return any(not child.null for child in self._children)

    def has_child_at(self, tag: str) -> bool:
        return self.get(tag) is not None

    def has_child_at_index(self, index: int) -> bool:
        return self.get_index(index) is not None

    def set_null(self, null: bool = True) -> None:
        self.null = null

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator["OTMLNode"]:
        return iter(self.children())

    def __repr__(self) -> str:
        label = self.tag or "-"
        if self.null:
            return f"<OTMLNode {label}: ~>"
        return f"<OTMLNode {label}: {self.value!r} children={len(self._children)}>"

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def get(self, tag: str) -> Optional["OTMLNode"]:
        """Return the first non-null child with this tag, or None."""
        for child in self._children:
            if child.tag == tag and not child.null:
                return child
        return None

    def get_index(self, index: int) -> Optional["OTMLNode"]:
        """Return the child at ``index`` (null children count), or None."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None

    def at(self, tag: str) -> "OTMLNode":
        child = self.get(tag)
        if child is None:
            raise NotFound(f"child node with tag '{tag}' not found", source=self.source)
        return child

    def at_index(self, index: int) -> "OTMLNode":
        child = self.get_index(index)
        if child is None:
            raise NotFound(f"child node with index '{index}' not found", source=self.source)
        return child

    def find(self, path: str) -> "OTMLNode":
        """
        Follow a dotted path such as ``server.hosts.0``.

        Numeric segments are child indexes, everything else is a tag.
        Raises NotFound from the first step that does not resolve.
        """
        node = self
        for part in path.split("."):
            if part.isdigit():
                node = node.at_index(int(part))
            else:
                node = node.at(part)
        return node

    def children(self) -> List["OTMLNode"]:
        """Children in order, null ones left out."""
        return [child for child in self._children if not child.null]

    def iter_subtree(self) -> Iterator["OTMLNode"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self._children:
            yield from child.iter_subtree()

    # ------------------------------------------------------------------ #
    # Typed values
    # ------------------------------------------------------------------ #

    def read(self, target: Type[T] = str) -> T:  # type: ignore[assignment]
        """Convert this node's value to ``target``."""
        if self.null:
            raise CastError("cannot read the value of a null node", source=self.source)
        try:
            return from_text(self.value, target)
        except CastError as exc:
            raise CastError(exc.message, source=self.source) from exc

    def value_at(self, tag: str, target: Type[T] = str, default: Any = _MISSING) -> T:  # type: ignore[assignment]
        """
        Typed value of the child tagged ``tag``.

        Without ``default`` a missing child raises NotFound. With it, the
        default is returned instead; a value that is present but does not
        convert still raises CastError.
        """
        if default is _MISSING:
            return self.at(tag).read(target)
        try:
            child = self.at(tag)
        except NotFound:
            return default
        return child.read(target)

    def value_at_index(self, index: int, target: Type[T] = str, default: Any = _MISSING) -> T:  # type: ignore[assignment]
        if default is _MISSING:
            return self.at_index(index).read(target)
        try:
            child = self.at_index(index)
        except NotFound:
            return default
        if child.null:
            return default
        return child.read(target)

    def write(self, value: Any) -> None:
        self.value = to_text(value)
        self.null = False

    def write_at(self, tag: str, value: Any) -> "OTMLNode":
        """Set the keyed child ``tag`` to ``value``, replacing an existing one."""
        child = OTMLNode(tag=tag, unique=True)
        child.write(value)
        return self.add_child(child)

    def write_in(self, value: Any) -> "OTMLNode":
        """Append an untagged (sequence) child holding ``value``."""
        child = OTMLNode()
        child.write(value)
        return self.add_child(child)

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def _attach(self, child: "OTMLNode") -> None:
        child._parent = weakref.ref(self)

    @staticmethod
    def _detach(child: "OTMLNode") -> None:
        child._parent = None

    def _index_of(self, child: "OTMLNode") -> int:
        for i, existing in enumerate(self._children):
            if existing is child:
                return i
        return -1

    def _check_insertable(self, child: "OTMLNode") -> None:
        node: Optional[OTMLNode] = self
        while node is not None:
            if node is child:
                raise ValueError("cannot insert a node under itself or one of its descendants")
            node = node.parent
        owner = child.parent
        if owner is not None:
            owner.remove_child(child)

    def add_child(self, new_child: "OTMLNode") -> "OTMLNode":
        """
        Insert ``new_child`` and return it.

        If it carries a tag already used by a child, and either of the two is
        unique, it takes the first such child's position (becoming unique
        itself) and every other child with that tag is dropped. Otherwise it
        is appended.
        """
        self._check_insertable(new_child)

        if new_child.has_tag():
            for node in self._children:
                if node.tag == new_child.tag and (node.unique or new_child.unique):
                    new_child.unique = True
                    self.replace_child(node, new_child)

                    kept: List[OTMLNode] = []
                    for child in self._children:
                        if child is not new_child and child.tag == new_child.tag:
                            self._detach(child)
                        else:
                            kept.append(child)
                    self._children = kept
                    return new_child

        self._children.append(new_child)
        self._attach(new_child)
        return new_child

    def remove_child(self, old_child: "OTMLNode") -> bool:
        index = self._index_of(old_child)
        if index < 0:
            return False
        del self._children[index]
        self._detach(old_child)
        return True

    def replace_child(self, old_child: "OTMLNode", new_child: "OTMLNode") -> bool:
        index = self._index_of(old_child)
        if index < 0:
            return False
        if new_child is old_child:
            return True

        node: Optional[OTMLNode] = self
        while node is not None:
            if node is new_child:
                return False
            node = node.parent

        owner = new_child.parent
        if owner is not None:
            owner.remove_child(new_child)
            # new_child may have been a sibling ahead of old_child
            index = self._index_of(old_child)

        self._detach(old_child)
        self._children[index] = new_child
        self._attach(new_child)
        return True

    def merge(self, other: "OTMLNode") -> None:
        """Take ``other``'s tag and source and add clones of all its children."""
        self.tag = other.tag
        self.source = other.source
        for child in list(other._children):
            self.add_child(child.clone())

    def clear(self) -> None:
        for child in self._children:
            self._detach(child)
        self._children = []

    def clone(self) -> "OTMLNode":
        copy = OTMLNode(
            tag=self.tag,
            value=self.value,
            unique=self.unique,
            null=self.null,
            source=self.source,
        )
        for child in self._children:
            copy.add_child(child.clone())
        return copy

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def emit(self) -> str:
        """Canonical text of this node and its subtree, starting at depth 0."""
        from otml.exporter.emitter import emit_node

        return emit_node(self, 0)
