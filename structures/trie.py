"""
trie.py — Prefix Tree
======================
Nodes are {char, children, is_end}.  Every node is addressed by its path
id ("root", "root-c", "root-c-a", …) which is what StepEvents carry so a
renderer can highlight the walked path.

Stepped insert / search live in algorithms/trie_ops.py; the plain
insert here is used for seeding and resets.
"""

from typing import Dict, Iterable, List, Optional

from structures.result import OperationResult


DEFAULT_WORDS: List[str] = ["cat", "car", "card", "care", "do", "dog", "done"]

ROOT_ID = "root"


def child_id(path_id: str, char: str) -> str:
    return f"{path_id}-{char}"


class TrieNode:
    __slots__ = ("char", "children", "is_end")

    def __init__(self, char: str = ""):
        self.char:     str                   = char
        self.children: Dict[str, "TrieNode"] = {}
        self.is_end:   bool                  = False

    def to_dict(self) -> dict:
        return {
            "char":     self.char,
            "is_end":   self.is_end,
            "children": {c: n.to_dict() for c, n in sorted(self.children.items())},
        }


class Trie:
    def __init__(self, words: Iterable[str] = ()):
        self.root = TrieNode()
        for w in words:
            self.insert(w)

    @classmethod
    def default(cls) -> "Trie":
        return cls(DEFAULT_WORDS)

    def insert(self, word: str) -> None:
        node = self.root
        for c in word:
            node = node.children.setdefault(c, TrieNode(c))
        node.is_end = True

    def find(self, prefix: str) -> Optional[TrieNode]:
        node = self.root
        for c in prefix:
            node = node.children.get(c)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_end

    def words(self, prefix: str = "") -> List[str]:
        """All stored words starting with prefix, alphabetically."""
        start = self.find(prefix)
        out: List[str] = []
        if start is not None:
            self._collect(start, prefix, out)
        return out

    def _collect(self, node: TrieNode, acc: str, out: List[str]) -> None:
        if node.is_end:
            out.append(acc)
        for c in sorted(node.children):
            self._collect(node.children[c], acc + c, out)

    def starts_with(self, prefix: str) -> OperationResult:
        matches = self.words(prefix)
        if not matches:
            return OperationResult(False, f'No words start with "{prefix}"', [])
        return OperationResult(True, f'{len(matches)} word(s) start with "{prefix}"', matches)

    def delete(self, word: str) -> OperationResult:
        """Unmark the word and prune nodes that no longer lead anywhere."""
        path = [self.root]
        for c in word:
            nxt = path[-1].children.get(c)
            if nxt is None:
                return OperationResult(False, f'"{word}" not found')
            path.append(nxt)
        if not path[-1].is_end:
            return OperationResult(False, f'"{word}" is a prefix but not a complete word')

        path[-1].is_end = False
        for depth in range(len(word), 0, -1):
            node = path[depth]
            if node.is_end or node.children:
                break
            del path[depth - 1].children[word[depth - 1]]
        return OperationResult(True, f'Deleted "{word}"', word)

    def node_count(self) -> int:
        count, stack = 0, [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def to_dict(self) -> dict:
        return {"root": self.root.to_dict(), "words": self.words()}
