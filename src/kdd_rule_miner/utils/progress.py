"""Progress bars for long-running loops."""

from __future__ import annotations

from typing import Iterable

from tqdm import tqdm


def progress(it: Iterable, desc: str = "", unit: str = "it", disable: bool = False) -> tqdm:
    return tqdm(
        it,
        desc=desc,
        unit=unit,
        disable=disable,
        dynamic_ncols=True,
        smoothing=0.1,
        mininterval=0.1,
    )
