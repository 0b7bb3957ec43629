"""Tests for the host-info-probe command."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from host_info.probe import DEFAULT_INFO_URL, fetch_system_info, main

INFO = {
    "cpu": ["CPU 1: 1.00%"],
    "memory": "1.0 GB",
    "disk": "2.0 GB",
    "uptime": "0 days, 0 hours, 1 minutes, 0 seconds",
}


def _response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Server Error")
    return response


def test_default_url_points_at_local_service():
    assert DEFAULT_INFO_URL == "http://127.0.0.1:8080/info"


def test_fetch_system_info_returns_json():
    with patch("host_info.probe.requests.get", return_value=_response(payload=INFO)) as mock_get:
        assert fetch_system_info("http://host:8080/info", timeout=2.5) == INFO
    mock_get.assert_called_once_with("http://host:8080/info", timeout=2.5)


def test_main_prints_info(capsys):
    with patch("host_info.probe.requests.get", return_value=_response(payload=INFO)):
        assert main(["--url", "http://host:8080/info"]) == 0

    assert json.loads(capsys.readouterr().out) == INFO


def test_main_fails_on_server_error(caplog):
    with patch("host_info.probe.requests.get", return_value=_response(status_code=500)):
        assert main([]) == 1
    assert "Failed to fetch host info" in caplog.text


def test_main_fails_when_unreachable():
    with patch(
        "host_info.probe.requests.get",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        assert main(["--timeout", "0.5"]) == 1


def test_rejects_non_numeric_timeout():
    with pytest.raises(SystemExit):
        main(["--timeout", "soon"])


def test_main_ignores_log_level_environment(monkeypatch):
    monkeypatch.setenv("HOST_INFO_LOG_LEVEL", "bogus")
    with patch(
        "host_info.probe.requests.get",
        side_effect=requests.ConnectionError("connection refused"),
    ):
        assert main([]) == 1
