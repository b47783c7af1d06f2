# file_composite.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, TextIO

from validators import Validator

INDENT_STEP = "   "


class FileComponent(ABC):
    """
    Common interface for files (leaves) and folders (composites),
    so a tree can be printed without asking what each node is.
    """

    def __init__(self, name: str) -> None:
        self.name = Validator.require_non_empty("name", name)

    @abstractmethod
    def lines(self, indent: str = "") -> list[str]:
        raise NotImplementedError

    def display(self, indent: str = "", *, stream: TextIO | None = None) -> None:
        for line in self.lines(indent):
            print(line, file=stream)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class FileLeaf(FileComponent):
    def lines(self, indent: str = "") -> list[str]:
        return [f"{indent}- File: {self.name}"]


class FolderComposite(FileComponent):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._children: list[FileComponent] = []

    @property
    def children(self) -> tuple[FileComponent, ...]:
        return tuple(self._children)

    def add(self, component: FileComponent) -> None:
        self._children.append(component)

    def remove(self, component: FileComponent) -> None:
        """Removes the given node (by identity); absent nodes are ignored."""
        for idx, child in enumerate(self._children):
            if child is component:
                del self._children[idx]
                return

    def lines(self, indent: str = "") -> list[str]:
        out = [f"{indent}+ Folder: {self.name}"]
        for child in self._children:
            out.extend(child.lines(indent + INDENT_STEP))
        return out


def build_tree(node: Any) -> FileComponent:
    """
    Builds a tree from plain data:
      - str                          -> FileLeaf
      - {"name": ..., "children": [...]} -> FolderComposite
    """
    if isinstance(node, str):
        return FileLeaf(node)
    if isinstance(node, dict):
        folder = FolderComposite(node.get("name", ""))
        children = node.get("children") or []
        if not isinstance(children, list):
            raise ValueError(f"Folder '{folder.name}': 'children' must be a list.")
        for child in children:
            folder.add(build_tree(child))
        return folder
    raise ValueError(f"Tree node must be a file name or a folder mapping, got {node!r}.")
