# core/batching.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence

# The service refuses more than this many destinations per call
DEFAULT_BATCH_SIZE = 25


def chunk_destinations(destinations: Sequence[str], size: int) -> List[List[str]]:
    """Split destinations into consecutive chunks of at most `size`, keeping order."""
    if size < 1:
        raise ValueError(f"batch size must be >= 1, got {size}")
    seq = list(destinations)
    return [seq[i : i + size] for i in range(0, len(seq), size)]


def _first_row_elements(payload: Dict[str, Any]) -> List[Any]:
    rows = payload.get("rows") or []
    if not rows or not isinstance(rows[0], dict):
        return []
    return list(rows[0].get("elements") or [])


def _at(items: List[Any], i: int) -> Optional[Any]:
    return items[i] if i < len(items) else None


def merge_batch_results(
    origin: str,
    chunks: Sequence[Sequence[str]],
    payloads: Sequence[Dict[str, Any]],
) -> Dict[str, List[Dict[str, Any]]]:
    """
    Fold per-batch payloads into {origin: [entry, ...]}.

    Entries are positional: the i-th requested destination of a batch is
    paired with the i-th resolved address and the i-th element of the first
    row. Elements stay as the service sent them.
    """
    merged: Dict[str, List[Dict[str, Any]]] = {origin: []}
    for chunk, payload in zip(chunks, payloads):
        addresses = list(payload.get("destination_addresses") or [])
        elements = _first_row_elements(payload)
        for i, destination in enumerate(chunk):
            merged[origin].append(
                {
                    "destination": destination,
                    "destination_address": _at(addresses, i),
                    "element": _at(elements, i),
                }
            )
    return merged
