from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from crossband.errors import BandDataError
from crossband.series import MAX_EXACT_X, PointSeries, Sample, build_series


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_pairs(
    y1: Any,
    y2: Any,
    *,
    x: Any = None,
    data: Any = None,
) -> PointSeries:
    """Build a PointSeries from two parallel y inputs and an optional integer x.

    Inputs may be sequences, numpy arrays, pandas Series, torch tensors, or
    column names in ``data`` (a pandas DataFrame).
    """
    y1_arr = _coerce_1d_numeric(_resolve_input(y1, data=data), label="y1")
    y2_arr = _coerce_1d_numeric(_resolve_input(y2, data=data), label="y2")
    if y1_arr.shape != y2_arr.shape:
        raise BandDataError(f"y1 and y2 length mismatch: {y1_arr.size} != {y2_arr.size}")

    if x is None:
        x_arr = np.arange(y1_arr.size, dtype=np.int64)
    else:
        x_raw = _coerce_1d_numeric(_resolve_input(x, data=data), label="x")
        if x_raw.shape != y1_arr.shape:
            raise BandDataError(f"x and y length mismatch: {x_raw.size} != {y1_arr.size}")
        if not np.all(np.isfinite(x_raw)):
            raise BandDataError("x contains non-finite values")
        if not np.all(x_raw == np.rint(x_raw)):
            raise BandDataError("x values must be integers")
        if np.any(np.abs(x_raw) > MAX_EXACT_X):
            raise BandDataError("x values must satisfy |x| <= 2**53")
        x_arr = x_raw.astype(np.int64)

    for label, arr in (("y1", y1_arr), ("y2", y2_arr)):
        bad = np.flatnonzero(~np.isfinite(arr))
        if bad.size:
            raise BandDataError(f"{label} contains non-finite value at index {int(bad[0])}")

    samples = [
        Sample(x=int(xv), y1=float(a), y2=float(b))
        for xv, a, b in zip(x_arr.tolist(), y1_arr.tolist(), y2_arr.tolist(), strict=True)
    ]
    return build_series(samples)


def _resolve_input(value: Any, *, data: Any) -> Any:
    if data is None:
        return value
    if pd is None:
        raise BandDataError("pandas is required when using `data=`")
    if not isinstance(data, pd.DataFrame):
        raise BandDataError("`data` must be a pandas DataFrame")
    if isinstance(value, str):
        if value not in data.columns:
            raise BandDataError(f"column not found: {value}")
        return data[value]
    return value


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise BandDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise BandDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise BandDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise BandDataError(f"{label} must be 1-D")
    if arr.dtype.kind == "b":
        raise BandDataError(f"{label} must be numeric, got booleans")
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, bool):
            raise BandDataError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise BandDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
