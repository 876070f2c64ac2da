from pathlib import Path

from comparison_graph import _row_label, generate_comparison_graphs
from criterion_data import BenchmarkRecord
from table_report import make_report


def test_one_graph_per_table(tmp_path: Path) -> None:
    report = make_report(
        [
            BenchmarkRecord("Fib/Recursive/10", 111.67),
            BenchmarkRecord("Fib/Iterative/10", 1.38),
            BenchmarkRecord("Fib/Recursive/20", 13_700.0),
            BenchmarkRecord("Hash Map/Insert", 2_500_000.0),
        ]
    )

    output_dir = tmp_path / "graphs"
    files = generate_comparison_graphs(report, output_dir)

    assert [Path(f).name for f in files] == ["fib.png", "hash-map.png"]
    for f in files:
        assert Path(f).stat().st_size > 0


def test_colliding_table_keys_get_distinct_files(tmp_path: Path, caplog) -> None:
    report = make_report(
        [
            BenchmarkRecord("Hash Map/Insert", 10.0),
            BenchmarkRecord("hash map/Insert", 20.0),
            BenchmarkRecord("Hash-Map/Insert", 30.0),
        ]
    )

    files = generate_comparison_graphs(report, tmp_path)

    assert [Path(f).name for f in files] == [
        "hash-map.png",
        "hash-map-2.png",
        "hash-map-3.png",
    ]
    assert all(Path(f).exists() for f in files)
    assert "already used" in caplog.text


def test_row_labels_tell_blank_from_empty() -> None:
    assert _row_label(None) == "(all)"
    assert _row_label("") == '""'
    assert _row_label("10") == "10"
