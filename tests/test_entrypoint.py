"""Runner — port selection and startup-fatal exit.

Invariants:
    - PORT unset → uvicorn binds 8080
    - Broken template assets → CRITICAL log and exit status 1, listener never started
"""

import logging

import pytest

import fttx_portal.__main__ as runner


@pytest.fixture
def fake_uvicorn(monkeypatch):
    calls = []
    monkeypatch.setattr(
        runner.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)),
    )
    yield calls
    for handler in list(logging.root.handlers):
        if handler.get_name() == "fttx_portal":
            logging.root.removeHandler(handler)


def test_binds_8080_when_port_unset(monkeypatch, clear_settings_cache, fake_uvicorn):
    monkeypatch.delenv("PORT", raising=False)
    runner.main()
    assert len(fake_uvicorn) == 1
    app, kwargs = fake_uvicorn[0]
    assert kwargs["port"] == 8080
    assert kwargs["host"] == "0.0.0.0"
    assert len(app.state.catalog) == 4


def test_binds_port_from_environment(monkeypatch, clear_settings_cache, fake_uvicorn):
    monkeypatch.setenv("PORT", "5001")
    runner.main()
    assert fake_uvicorn[0][1]["port"] == 5001


def test_missing_templates_exit_fatally(
    monkeypatch, tmp_path, clear_settings_cache, fake_uvicorn, caplog,
):
    monkeypatch.setenv("TEMPLATES_DIR", str(tmp_path / "missing"))
    with pytest.raises(SystemExit) as exc_info:
        runner.main()
    assert exc_info.value.code == 1
    assert fake_uvicorn == []
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)


def test_invalid_port_exits_fatally(monkeypatch, clear_settings_cache, fake_uvicorn, caplog):
    monkeypatch.setenv("PORT", "abc")
    with pytest.raises(SystemExit) as exc_info:
        runner.main()
    assert exc_info.value.code == 1
    assert fake_uvicorn == []
    critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert critical and "Invalid configuration" in critical[0].getMessage()


def test_importing_app_module_builds_nothing():
    import fttx_portal.main as app_module

    assert not hasattr(app_module, "app")
