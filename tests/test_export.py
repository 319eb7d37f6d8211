import json
import os

import pytest

from mazerealm.export import read_tsv, write_json, write_tsv
from mazerealm.mapgen.generator import generate_level

def test_tsv_dump_reads_back(tmp_path):
    d = generate_level(4, 2, "tsv")
    path = os.path.join(str(tmp_path), "out", "level.tsv")
    write_tsv(d.grid, path)
    got = read_tsv(path)
    assert got == [list(r) for r in d.grid]

def test_read_tsv_rejects_ragged(tmp_path):
    path = tmp_path / "bad.tsv"
    path.write_text("1\t1\t1\n1\t0\n1\t1\t1\n")
    with pytest.raises(ValueError):
        read_tsv(str(path))

def test_json_record(tmp_path):
    d = generate_level(6, 1, 5)
    path = str(tmp_path / "level.json")
    write_json(d, path)
    with open(path, encoding="utf-8") as f:
        rec = json.load(f)
    assert rec == d.to_dict()
    assert rec["mode"] == "wilson"
