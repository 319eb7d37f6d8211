# src/mazerealm/export.py
# Plain-text dumps of generated levels for tooling (TSV grids, JSON records).

import csv
import json
import os
from typing import List, Sequence

from .level import LevelDescriptor

def write_tsv(grid: Sequence[Sequence[int]], path: str, include_header: bool = False) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.writer(f, delimiter="\t")
        if include_header:
            w.writerow(list(range(len(grid[0]))))
        for row in grid:
            w.writerow(row)

def read_tsv(path: str) -> List[List[int]]:
    rows = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    if any(len(r) != len(rows) for r in rows):
        raise ValueError(f"{path}: expected a square grid")
    return rows

def write_json(desc: LevelDescriptor, path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(desc.to_dict(), f)
