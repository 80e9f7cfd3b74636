import logging

import pytest

from safecalc import config, main as main_module


@pytest.fixture(autouse=True)
def quiet_package_logger():
    yield
    # main() installs handlers on the package logger; drop them between tests
    logger = logging.getLogger("safecalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_eval_prints_result_and_exits_zero(capsys: pytest.CaptureFixture) -> None:
    status = main_module.main(["--eval", "7/2"])

    out = capsys.readouterr().out
    assert status == 0
    assert out.strip().splitlines()[-1] == "3.5"


def test_eval_failure_prints_error_marker_and_exits_one(capsys: pytest.CaptureFixture) -> None:
    status = main_module.main(["--eval", "3+4;"])

    out = capsys.readouterr().out
    assert status == 1
    assert out.strip().splitlines()[-1] == config.ERROR_MARKER


def test_debug_flag_sets_debug_level() -> None:
    main_module.main(["--debug", "--eval", "1+1"])
    assert logging.getLogger("safecalc").level == logging.DEBUG


def test_log_level_can_come_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "warning")
    main_module.main(["--eval", "1+1"])
    assert logging.getLogger("safecalc").level == logging.WARNING


def test_log_file_receives_failures(tmp_path) -> None:
    log_file = tmp_path / "safecalc.log"

    main_module.main(["--log-file", str(log_file), "--eval", "2+"])
    for handler in logging.getLogger("safecalc").handlers:
        handler.flush()

    assert "Could not evaluate '2+'" in log_file.read_text(encoding="utf-8")


def test_gui_mode_is_used_without_eval(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_run_gui(evaluator, argv):
        seen["evaluator"] = evaluator
        return 0

    monkeypatch.setattr(main_module, "run_gui", fake_run_gui)

    assert main_module.main([]) == 0
    assert seen["evaluator"].evaluate("2*3") == "6"


def test_log_level_flag_sets_level() -> None:
    main_module.main(["--log-level", "error", "--eval", "1+1"])
    assert logging.getLogger("safecalc").level == logging.ERROR


def test_unknown_log_level_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main_module.main(["--log-level", "chatty", "--eval", "1+1"])
    assert exc_info.value.code == 2
