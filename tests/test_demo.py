import logging

import pandas as pd
import pytest

from iris_mlp.demo import main, parse_args


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.iterations is None
    assert args.compare is False
    assert args.output_dir is None


def test_main_writes_results_and_chart(tmp_path, restore_root_logging):
    code = main(["--iterations", "200", "--output_dir", str(tmp_path)])
    assert code == 0
    table = pd.read_csv(tmp_path / "results.csv")
    assert list(table.columns) == ["actual", "mlp"]
    assert len(table) == 30
    assert (tmp_path / "loss.png").exists()
    assert (tmp_path / "debug.log").exists()


def test_main_reports_failure(tmp_path, restore_root_logging):
    code = main(["--iterations", "-1", "--output_dir", str(tmp_path)])
    assert code == 1
    log = (tmp_path / "debug.log").read_text()
    assert "Run failed" in log
    assert "Traceback" in log, "The failure log must include the traceback."


def test_main_compare_adds_reference_column(tmp_path, restore_root_logging):
    code = main(["--iterations", "200", "--compare", "--output_dir", str(tmp_path)])
    assert code == 0
    table = pd.read_csv(tmp_path / "results.csv")
    assert list(table.columns) == ["actual", "mlp", "reference"]
    assert set(table["reference"]) <= {"setosa", "versicolor", "virginica"}
    assert (table["reference"] == table["actual"]).mean() > 0.8
