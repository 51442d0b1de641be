"""
trie_ops.py — Trie Insert / Search
===================================
One pausing step per character consumed:

  • INSERT  – a node had to be created for this character
  • ADVANCE – the edge already existed, just walk it
  • MISS    – search only: no edge for this character, stop

Search results: "found", "prefix" (path exists but not a word) or "missing".
"""

from typing import Generator, List

from structures.trie import ROOT_ID, Trie, TrieNode, child_id
from algorithms.step import StepBuilder, StepEvent, StepKind


INSERT_PSEUDOCODE: List[str] = [
    "node ← root",                                        # 0
    "for c in word:",                                     # 1
    "    if c not in node.children: create child",        # 2
    "    node ← node.children[c]",                        # 3
    "node.is_end ← true",                                 # 4
]

SEARCH_PSEUDOCODE: List[str] = [
    "node ← root",                                        # 0
    "for c in word:",                                     # 1
    "    if c not in node.children: return NOT FOUND",    # 2
    "    node ← node.children[c]",                        # 3
    "return node.is_end",                                 # 4
]


def trie_insert(trie: Trie, word: str) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    node = trie.root
    path = [ROOT_ID]

    for i, c in enumerate(word):
        nid = child_id(path[-1], c)
        if c in node.children:
            node = node.children[c]
            kind, text = StepKind.ADVANCE, f"'{c}' already present — follow it"
        else:
            node.children[c] = TrieNode(c)
            node = node.children[c]
            sb.counters.writes += 1
            kind, text = StepKind.INSERT, f"Create node for '{c}'"
        path.append(nid)
        sb.counters.visits += 1
        yield sb.build(
            kind, f'Inserting "{word}" [{i + 1}/{len(word)}]: {text}',
            nodes=tuple(path), line=2 if kind is StepKind.INSERT else 3,
            overlay={"prefix": word[:i + 1]},
        )

    node.is_end = True
    yield sb.done(f'Inserted "{word}"', result=word, nodes=tuple(path), line=4)


def trie_search(trie: Trie, word: str) -> Generator[StepEvent, None, None]:
    sb = StepBuilder()
    node = trie.root
    path = [ROOT_ID]

    for i, c in enumerate(word):
        sb.counters.comparisons += 1
        nxt = node.children.get(c)
        if nxt is None:
            yield sb.build(
                StepKind.MISS, f"No edge for '{c}' after \"{word[:i]}\"",
                nodes=tuple(path), line=2, overlay={"prefix": word[:i]},
            )
            yield sb.done(
                f'"{word}" not found — no path for \'{c}\'', result="missing",
                kind=StepKind.NOT_FOUND, nodes=tuple(path), line=2,
            )
            return
        node = nxt
        path.append(child_id(path[-1], c))
        sb.counters.visits += 1
        yield sb.build(
            StepKind.ADVANCE, f"Follow '{c}' ({i + 1}/{len(word)})",
            nodes=tuple(path), line=3, overlay={"prefix": word[:i + 1]},
        )

    if node.is_end:
        yield sb.done(f'"{word}" found!', result="found", kind=StepKind.FOUND,
                      nodes=tuple(path), line=4)
    else:
        yield sb.done(f'"{word}" is a prefix but not a complete word', result="prefix",
                      kind=StepKind.NOT_FOUND, nodes=tuple(path), line=4)
