"""
visualizer.py — Per-Family Visualizers & Workspace
===================================================
A Visualizer is one page of the app: it owns ONE data structure, ONE
Stepper and the instant structure operations for that family.

    viz = SortingVisualizer([5, 3, 8, 1])
    viz.run("bubble", speed=70)
    viz.step()                  # → [StepEvent, …] up to the next boundary
    viz.apply("shuffle", {})    # → OperationResult

Rules enforced here:
  - Only algorithms registered for the visualizer's family may run on it.
  - Starting a run while one is RUNNING raises RunRejected.
  - Every mutating operation raises RunRejected while a run is RUNNING;
    read-only operations (peek, search, prefix, …) stay available.
  - Inputs are validated before anything is touched (InvalidInput).

Operations are methods named `op_<name>` taking the raw params dict.
The Workspace holds one visualizer per family, built from app config.
"""

import logging
import random
from typing import Any, Dict, List, Mapping, Optional

from algorithms import get_algorithm, list_algorithms
from algorithms.step import StepEvent
from algorithms.validation import InvalidInput, MAX_SEQUENCE, parse_int, parse_values, parse_word
from engine.errors import RunRejected, UnknownOperation
from engine.speed import PROFILES, SPEED_PRESETS
from engine.stepper import RunSummary, Stepper
from structures import (
    BinaryHeap, BinarySearchTree, ChainedHashTable, Graph,
    OperationResult, Queue, SinglyLinkedList, Stack, Trie,
)
from structures.sequence import is_sorted, random_sequence, sorted_sequence


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------
class Visualizer:
    family: str = ""
    READ_ONLY_OPS: frozenset = frozenset()

    def __init__(self, data: Any, speed: int = SPEED_PRESETS["medium"], rng: Optional[random.Random] = None):
        self.data    = data
        self.rng     = rng or random.Random()
        self.stepper = Stepper(PROFILES.get(self.family, PROFILES["sorting"]), speed=speed)

    # ------------------------------------------------------------------
    # Runs
    # ------------------------------------------------------------------
    def run(self, algo_key: str, params: Optional[Dict[str, Any]] = None, speed: Optional[int] = None) -> RunSummary:
        info = get_algorithm(algo_key)
        if info is None or info.family != self.family:
            raise UnknownOperation(f"Unknown {self.family} algorithm: {algo_key}")
        if self.stepper.is_running:
            raise RunRejected(f"{self.family}: a run is already in progress")
        gen = info.prepare(self.data, params or {})
        self.stepper.start(gen, speed=speed, label=info.key)
        return self.stepper.summary()

    def step(self) -> List[StepEvent]:
        return self.stepper.step()

    def finish(self) -> RunSummary:
        return self.stepper.run_to_completion()

    def cancel(self) -> RunSummary:
        """Request cancellation and let the next boundary observe it."""
        if self.stepper.cancel():
            self.stepper.step()
        return self.stepper.summary()

    def reset(self) -> RunSummary:
        self.stepper.reset()
        return self.stepper.summary()

    def set_speed(self, speed: int) -> int:
        self.stepper.set_speed(speed)
        return self.stepper.speed

    # ------------------------------------------------------------------
    # Instant operations
    # ------------------------------------------------------------------
    def operations(self) -> List[str]:
        return sorted(name[3:] for name in dir(self) if name.startswith("op_"))

    def apply(self, op: str, params: Optional[Dict[str, Any]] = None) -> OperationResult:
        handler = getattr(self, f"op_{op}", None)
        if handler is None:
            raise UnknownOperation(f"Unknown {self.family} operation: {op}")
        if op not in self.READ_ONLY_OPS and self.stepper.is_running:
            raise RunRejected(f"{self.family}: cannot {op} while a run is in progress")
        result = handler(params or {})
        logger.info("%s.%s → %s", self.family, op, result.message)
        return result

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------
    def snapshot(self) -> Any:
        return self.data.to_dict()

    def state(self) -> dict:
        return {
            "family":     self.family,
            "data":       self.snapshot(),
            "run":        self.stepper.summary().to_dict(),
            "algorithms": [a.key for a in list_algorithms(self.family)],
            "operations": self.operations(),
        }


# ---------------------------------------------------------------------------
# Array pages
# ---------------------------------------------------------------------------
class SortingVisualizer(Visualizer):
    family = "sorting"

    def snapshot(self) -> dict:
        return {"values": list(self.data), "sorted": is_sorted(self.data)}

    def op_shuffle(self, params) -> OperationResult:
        size = parse_int(params.get("size", len(self.data) or 20), "size", 2, MAX_SEQUENCE)
        self.data[:] = random_sequence(size, self.rng)
        return OperationResult(True, f"Generated {size} random values", list(self.data))

    def op_custom(self, params) -> OperationResult:
        values = parse_values(params.get("values"), 1, 100)
        self.data[:] = values
        return OperationResult(True, f"Loaded {len(values)} values", list(self.data))


class SearchingVisualizer(Visualizer):
    family = "searching"

    def snapshot(self) -> dict:
        return {"values": list(self.data), "sorted": is_sorted(self.data)}

    def op_regenerate(self, params) -> OperationResult:
        size = parse_int(params.get("size", len(self.data) or 20), "size", 2, MAX_SEQUENCE)
        self.data[:] = sorted_sequence(size, self.rng)
        return OperationResult(True, f"Generated {size} sorted values", list(self.data))

    def op_custom(self, params) -> OperationResult:
        values = parse_values(params.get("values"))
        if params.get("sort", True):
            values.sort()
        self.data[:] = values
        return OperationResult(True, f"Loaded {len(values)} values", list(self.data))


# ---------------------------------------------------------------------------
# Graph page
# ---------------------------------------------------------------------------
class GraphVisualizer(Visualizer):
    family = "graph"

    def op_add_edge(self, params) -> OperationResult:
        source = parse_int(params.get("source"), "source", 0)
        target = parse_int(params.get("target"), "target", 0)
        if source == target:
            raise InvalidInput("An edge needs two different nodes")
        weight = parse_int(params.get("weight", 1), "weight", 0)
        edge = self.data.add_edge(source, target, weight)
        return OperationResult(True, f"Added edge {edge.key} (weight {weight})", edge.to_dict())

    def op_remove_edge(self, params) -> OperationResult:
        source = parse_int(params.get("source"), "source")
        target = parse_int(params.get("target"), "target")
        if not self.data.remove_edge(source, target):
            return OperationResult(False, f"No edge between {source} and {target}")
        return OperationResult(True, f"Removed edge {source}-{target}")

    def op_remove_node(self, params) -> OperationResult:
        node = parse_int(params.get("node"), "node")
        if not self.data.has_node(node):
            return OperationResult(False, f"Node {node} does not exist")
        self.data.remove_node(node)
        return OperationResult(True, f"Removed node {node} and its edges", node)

    def op_load(self, params) -> OperationResult:
        try:
            graph = Graph.from_edge_list(str(params.get("text") or ""))
        except ValueError as e:
            raise InvalidInput(str(e)) from None
        if not graph.nodes:
            raise InvalidInput("Enter at least one edge, e.g. 0-1:4")
        self.data = graph
        return OperationResult(True, f"Loaded graph with {len(graph.nodes)} nodes", graph.node_ids())

    def op_reset(self, params) -> OperationResult:
        self.data = Graph.default()
        return OperationResult(True, "Graph reset to default")


# ---------------------------------------------------------------------------
# Tree / heap / trie pages
# ---------------------------------------------------------------------------
class TreeVisualizer(Visualizer):
    family = "tree"
    READ_ONLY_OPS = frozenset({"contains"})

    def op_insert(self, params) -> OperationResult:
        value = parse_int(params.get("value"), "value")
        self.data.insert(value)
        return OperationResult(True, f"Inserted {value}", value)

    def op_contains(self, params) -> OperationResult:
        value = parse_int(params.get("value"), "value")
        if value in self.data:
            return OperationResult(True, f"{value} is in the tree", value)
        return OperationResult(False, f"{value} not found", value)

    def op_clear(self, params) -> OperationResult:
        self.data = BinarySearchTree()
        return OperationResult(True, "Tree cleared")

    def op_reset(self, params) -> OperationResult:
        self.data = BinarySearchTree.default()
        return OperationResult(True, "Tree reset to default values")


class HeapVisualizer(Visualizer):
    family = "heap"
    READ_ONLY_OPS = frozenset({"peek"})

    def op_toggle(self, params) -> OperationResult:
        return self.data.toggle_kind()

    def op_peek(self, params) -> OperationResult:
        return self.data.peek()

    def op_clear(self, params) -> OperationResult:
        return self.data.clear()

    def op_reset(self, params) -> OperationResult:
        self.data = BinaryHeap.default()
        return OperationResult(True, "Heap reset to default")


class TrieVisualizer(Visualizer):
    family = "trie"
    READ_ONLY_OPS = frozenset({"prefix"})

    def op_delete(self, params) -> OperationResult:
        return self.data.delete(parse_word(params.get("word")))

    def op_prefix(self, params) -> OperationResult:
        prefix = str(params.get("prefix") or "").strip().lower()
        if prefix and not (prefix.isascii() and prefix.isalpha()):
            raise InvalidInput(f"'{prefix}' must contain letters a-z only")
        return self.data.starts_with(prefix)

    def op_reset(self, params) -> OperationResult:
        self.data = Trie.default()
        return OperationResult(True, "Trie reset to default words")


# ---------------------------------------------------------------------------
# DP page — no persistent data, every run builds its own table
# ---------------------------------------------------------------------------
class DPVisualizer(Visualizer):
    family = "dp"

    def __init__(self, speed: int = SPEED_PRESETS["medium"], rng: Optional[random.Random] = None):
        super().__init__(None, speed, rng)

    def snapshot(self) -> dict:
        # table rebuilt from the published cell diffs
        cells: Dict[str, Any] = {}
        for event in self.stepper.events:
            for key, value in event.changes.items():
                cells[str(key)] = value
        return {"algorithm": self.stepper.label, "cells": cells}


# ---------------------------------------------------------------------------
# Linear structures
# ---------------------------------------------------------------------------
class LinkedListVisualizer(Visualizer):
    family = "linked_list"

    def op_append(self, params) -> OperationResult:
        return self.data.append(parse_int(params.get("value"), "value"))

    def op_prepend(self, params) -> OperationResult:
        return self.data.prepend(parse_int(params.get("value"), "value"))

    def op_insert_at(self, params) -> OperationResult:
        value = parse_int(params.get("value"), "value")
        index = parse_int(params.get("index"), "index", 0, len(self.data))
        return self.data.insert_at(index, value)

    def op_remove_head(self, params) -> OperationResult:
        return self.data.remove_head()

    def op_remove_tail(self, params) -> OperationResult:
        return self.data.remove_tail()

    def op_remove_at(self, params) -> OperationResult:
        if len(self.data) == 0:
            return OperationResult(False, "List is empty!")
        index = parse_int(params.get("index"), "index", 0, len(self.data) - 1)
        return self.data.remove_at(index)

    def op_clear(self, params) -> OperationResult:
        return self.data.clear()

    def op_reset(self, params) -> OperationResult:
        self.data = SinglyLinkedList.default()
        return OperationResult(True, "List reset to default")


class HashTableVisualizer(Visualizer):
    family = "hash_table"
    READ_ONLY_OPS = frozenset({"search"})

    def op_insert(self, params) -> OperationResult:
        return self.data.insert(parse_int(params.get("key"), "key"))

    def op_search(self, params) -> OperationResult:
        return self.data.search(parse_int(params.get("key"), "key"))

    def op_remove(self, params) -> OperationResult:
        return self.data.remove(parse_int(params.get("key"), "key"))

    def op_clear(self, params) -> OperationResult:
        return self.data.clear()

    def op_reset(self, params) -> OperationResult:
        self.data = ChainedHashTable.default(self.data.size)
        return OperationResult(True, "Hash table reset to default keys")


class StackVisualizer(Visualizer):
    family = "stack"
    READ_ONLY_OPS = frozenset({"peek"})

    def op_push(self, params) -> OperationResult:
        return self.data.push(parse_int(params.get("value"), "value"))

    def op_pop(self, params) -> OperationResult:
        return self.data.pop()

    def op_peek(self, params) -> OperationResult:
        return self.data.peek()


class QueueVisualizer(Visualizer):
    family = "queue"
    READ_ONLY_OPS = frozenset({"front"})

    def op_enqueue(self, params) -> OperationResult:
        return self.data.enqueue(parse_int(params.get("value"), "value"))

    def op_dequeue(self, params) -> OperationResult:
        return self.data.dequeue()

    def op_front(self, params) -> OperationResult:
        return self.data.front()

    def op_clear(self, params) -> OperationResult:
        return self.data.clear()


# ---------------------------------------------------------------------------
# Workspace — one visualizer per family
# ---------------------------------------------------------------------------
class Workspace:
    """
    Everything one browser session would see.  All entities are created
    fresh here and live only as long as the workspace does.
    """

    def __init__(
        self,
        sort_size: int = 20,
        search_size: int = 20,
        hash_size: int = 10,
        speed: int = SPEED_PRESETS["medium"],
        seed: Optional[int] = None,
    ):
        rng = random.Random(seed)
        self.visualizers: Dict[str, Visualizer] = {
            "sorting":     SortingVisualizer(random_sequence(sort_size, rng), speed, rng),
            "searching":   SearchingVisualizer(sorted_sequence(search_size, rng), speed, rng),
            "graph":       GraphVisualizer(Graph.default(seed), speed, rng),
            "tree":        TreeVisualizer(BinarySearchTree.default(), speed, rng),
            "heap":        HeapVisualizer(BinaryHeap.default(), speed, rng),
            "trie":        TrieVisualizer(Trie.default(), speed, rng),
            "dp":          DPVisualizer(speed, rng),
            "linked_list": LinkedListVisualizer(SinglyLinkedList.default(), speed, rng),
            "hash_table":  HashTableVisualizer(ChainedHashTable.default(hash_size), speed, rng),
            "stack":       StackVisualizer(Stack.default(), speed, rng),
            "queue":       QueueVisualizer(Queue.default(), speed, rng),
        }

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "Workspace":
        return cls(
            sort_size=int(config.get("SORT_ARRAY_SIZE", 20)),
            search_size=int(config.get("SEARCH_ARRAY_SIZE", 20)),
            hash_size=int(config.get("HASH_TABLE_SIZE", 10)),
            speed=int(config.get("DEFAULT_SPEED", SPEED_PRESETS["medium"])),
            seed=config.get("RANDOM_SEED"),
        )

    def get(self, family: str) -> Visualizer:
        viz = self.visualizers.get(family)
        if viz is None:
            raise UnknownOperation(f"Unknown visualizer: {family}")
        return viz

    def families(self) -> List[str]:
        return list(self.visualizers)

    def __getitem__(self, family: str) -> Visualizer:
        return self.get(family)
