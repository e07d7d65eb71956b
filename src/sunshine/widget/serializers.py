"""Serializers: pack selection state into bytes for instance-state bundles.

Layout (all little-endian)::

    b"SIK1"
    uint32 n_positions, uint32 n_ids
    int32[n_positions]  checked positions
    uint8[n_positions]  checked flags
    int64[n_ids]        stable ids
    int32[n_ids]        last known position of each id
"""

from __future__ import annotations

import numpy as np

MAGIC = b"SIK1"

_HEADER = np.dtype("<u4")
_POSITION = np.dtype("<i4")
_FLAG = np.dtype("u1")
_ID = np.dtype("<i8")


def _check_range(values, dtype: np.dtype, what: str) -> None:
    info = np.iinfo(dtype)
    bad = [v for v in values if not info.min <= v <= info.max]
    if bad:
        raise ValueError(
            f"Cannot serialize {what} outside {dtype.name} range: {bad[:5]}"
        )


def serialize_selection(
    checked_positions: dict[int, bool],
    checked_ids: dict[int, int],
) -> bytes:
    """Serialize position flags and id → position pairs."""
    positions = sorted(checked_positions)
    _check_range(positions, _POSITION, "positions")
    _check_range(checked_ids.keys(), _ID, "stable ids")
    _check_range(checked_ids.values(), _POSITION, "id positions")
    header = np.array([len(positions), len(checked_ids)], dtype=_HEADER)
    parts = [
        MAGIC,
        header.tobytes(),
        np.array(positions, dtype=_POSITION).tobytes(),
        np.array([checked_positions[p] for p in positions], dtype=_FLAG).tobytes(),
        np.array(list(checked_ids.keys()), dtype=_ID).tobytes(),
        np.array(list(checked_ids.values()), dtype=_POSITION).tobytes(),
    ]
    return b"".join(parts)


def deserialize_selection(blob: bytes) -> tuple[dict[int, bool], dict[int, int]]:
    """Inverse of :func:`serialize_selection`.

    Raises ValueError if the blob is truncated or not a selection record.
    """
    blob = bytes(blob)
    if not blob.startswith(MAGIC):
        raise ValueError("Not a selection state record (bad magic).")
    offset = len(MAGIC)
    if len(blob) < offset + 2 * _HEADER.itemsize:
        raise ValueError("Selection state record is truncated (header).")
    n_positions, n_ids = (
        int(n) for n in np.frombuffer(blob, dtype=_HEADER, count=2, offset=offset)
    )
    offset += 2 * _HEADER.itemsize

    expected = offset + n_positions * (_POSITION.itemsize + _FLAG.itemsize) + n_ids * (
        _ID.itemsize + _POSITION.itemsize
    )
    if len(blob) != expected:
        raise ValueError(
            f"Selection state record has {len(blob)} bytes, expected {expected}."
        )

    def take(dtype: np.dtype, count: int) -> np.ndarray:
        nonlocal offset
        if count == 0:
            return np.empty(0, dtype=dtype)
        arr = np.frombuffer(blob, dtype=dtype, count=count, offset=offset)
        offset += count * dtype.itemsize
        return arr

    positions = take(_POSITION, n_positions)
    flags = take(_FLAG, n_positions)
    ids = take(_ID, n_ids)
    id_positions = take(_POSITION, n_ids)

    checked_positions = {int(p): bool(f) for p, f in zip(positions, flags)}
    checked_ids = {int(i): int(p) for i, p in zip(ids, id_positions)}
    return checked_positions, checked_ids
