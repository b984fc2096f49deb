import logging

import pytest

from svm_lab.__main__ import main
from svm_lab.logging_config import setup_logging


def test_cli_reports_in_profession_vocabulary(capsys):
    assert main(["--mode", "hard", "--kernel", "linear", "--profession", "medical"]) == 0
    out = capsys.readouterr().out
    assert "Overall Diagnostic Accuracy" in out
    assert "100%" in out


def test_cli_saves_plot(tmp_path):
    target = tmp_path / "scene.png"
    assert main(["--mode", "nonlinear", "--kernel", "rbf", "--save-plot", str(target)]) == 0
    assert target.exists() and target.stat().st_size > 0


def test_cli_rejects_nonpositive_c():
    with pytest.raises(SystemExit) as exc:
        main(["--C", "0"])
    assert exc.value.code == 2


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    setup_logging("DEBUG")
    logger = setup_logging(logging.INFO, log_file=str(tmp_path / "lab.log"))
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2
    logger.handlers.clear()
