import importlib.util
import json
import pathlib

import pytest

SCRIPT = pathlib.Path(__file__).resolve().parents[1] / "scripts" / "benchmark_solvers.py"


@pytest.fixture
def benchmark():
    spec = importlib.util.spec_from_file_location("benchmark_solvers", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_benchmark_writes_jsonl(benchmark, tmp_path):
    output = tmp_path / "runs.jsonl"
    code = benchmark.main(
        [
            "--counts", "5", "20",
            "--instances-per-count", "1",
            "--algorithms", "exact", "heuristic",
            "--output", str(output),
            "--log-level", "WARNING",
        ]
    )
    assert code == 0
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert len(rows) == 4
    by_key = {(row["num_points"], row["requested"]): row for row in rows}
    assert by_key[(5, "exact")]["algorithm"] == "brute_force"
    assert by_key[(5, "heuristic")]["algorithm"] == "nearest_neighbor_2opt"
    assert by_key[(20, "exact")]["status"] == "skipped"
    assert by_key[(20, "heuristic")]["status"] == "complete"
    assert sorted(by_key[(20, "heuristic")]["tour"]) == list(range(20))
