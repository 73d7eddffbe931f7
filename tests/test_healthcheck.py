import runpy
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
from httpx import Response

HEALTHCHECK = Path(__file__).resolve().parent.parent / "healthcheck.py"


def _run_healthcheck(response=None, error=None):
    with patch("httpx.get", return_value=response, side_effect=error):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_path(str(HEALTHCHECK), run_name="__main__")
    return exc_info.value.code


def test_healthcheck_passes_on_200_with_non_json_body(capsys):
    assert _run_healthcheck(Response(200, text="ok")) == 0
    assert "Healthcheck passed." in capsys.readouterr().out


def test_healthcheck_fails_on_error_status(capsys):
    assert _run_healthcheck(Response(503)) == 1
    assert "status code: 503" in capsys.readouterr().out


def test_healthcheck_fails_when_unreachable(capsys):
    assert _run_healthcheck(error=httpx.ConnectError("refused")) == 1
    assert "Healthcheck failed with error" in capsys.readouterr().out
