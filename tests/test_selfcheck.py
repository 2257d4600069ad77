import pytest
import structlog
from structlog.testing import capture_logs

from base2.selfcheck import codec_self_check


def test_self_check_passes():
    with capture_logs() as logs:
        assert codec_self_check(structlog.get_logger()) is True

    checks = [e for e in logs if e["event"] == "codec_check"]
    assert checks
    assert all(e["status"] == "OK" for e in checks)
    assert logs[-1]["event"] == "codec_self_check_passed"


def test_self_check_fails_on_broken_encoder(monkeypatch):
    monkeypatch.setattr("base2.selfcheck.encode2", lambda data, mode: "x")

    with capture_logs() as logs:
        with pytest.raises(RuntimeError, match="Codec self-check failed"):
            codec_self_check(structlog.get_logger())

    failed = [e for e in logs if e.get("status") == "FAILED"]
    assert failed
    assert all(e["log_level"] == "error" for e in failed)
