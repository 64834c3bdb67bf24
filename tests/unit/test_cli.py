"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

import design_bot.cli as cli
from design_bot.errors import UpstreamError
from design_bot.provisioning import ProvisioningResult


class _FakeProvider:
    def __init__(self, _settings: Any, completion: str = "") -> None:
        self.completion = completion
        self.closed = False

    def chat(self, messages: list[dict[str, str]], **kwargs: Any) -> str:
        return self.completion

    def close(self) -> None:
        self.closed = True


class _FakePipeline:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.requests: list[Any] = []

    def run(self, request: Any) -> ProvisioningResult:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return ProvisioningResult(
            repository="octo-org/demo",
            html_url="https://github.com/octo-org/demo",
            readme_sha="sha",
            issue_numbers=(1, 2),
        )


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda _level: None)


@pytest.fixture
def transcript(tmp_path: Path) -> Path:
    path = tmp_path / "transcript.txt"
    path.write_text("We want a standup tracker.\n", encoding="utf-8")
    return path


def _install_pipeline(monkeypatch: pytest.MonkeyPatch, pipeline: _FakePipeline) -> None:
    class _Resources:
        def __init__(self, _settings: Any) -> None:
            pass

        def __enter__(self) -> _FakePipeline:
            return pipeline

        def __exit__(self, *exc_info: object) -> None:
            return None

    monkeypatch.setattr(cli, "PipelineResources", _Resources)


def test_dry_run_prints_parsed_design(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], transcript: Path
) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setattr(
        cli,
        "OpenAIProvider",
        lambda settings: _FakeProvider(settings, "Project Name: Demo App\nIssues:\n- one"),
    )

    code = cli.main(["process", "--transcript-file", str(transcript), "--dry-run"])

    assert code == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["project_name"] == "demo-app"
    assert printed["issues"] == ["one"]


def test_dry_run_requires_openai_key(
    capsys: pytest.CaptureFixture[str], transcript: Path
) -> None:
    code = cli.main(["process", "--transcript-file", str(transcript), "--dry-run"])

    assert code == 2
    assert "OPENAI_API_KEY" in capsys.readouterr().err


def test_process_provisions_and_reports(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], transcript: Path
) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("GITHUB_TOKEN", "gh-test")
    pipeline = _FakePipeline()
    _install_pipeline(monkeypatch, pipeline)

    code = cli.main(["process", "--transcript-file", str(transcript)])

    assert code == 0
    assert pipeline.requests[0].transcript_text == "We want a standup tracker.\n"
    out = capsys.readouterr().out
    assert "Repo and issues created." in out
    assert "#1, #2" in out


def test_process_requires_both_credentials(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], transcript: Path
) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    code = cli.main(["process", "--transcript-file", str(transcript)])

    assert code == 2
    assert "GITHUB_TOKEN" in capsys.readouterr().err


def test_blank_transcript_fails(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("GITHUB_TOKEN", "gh-test")
    pipeline = _FakePipeline()
    _install_pipeline(monkeypatch, pipeline)
    blank = tmp_path / "blank.txt"
    blank.write_text("  \n", encoding="utf-8")

    code = cli.main(["process", "--transcript-file", str(blank)])

    assert code == 1
    assert pipeline.requests == []
    assert "TranscriptText" in capsys.readouterr().err


def test_pipeline_error_exits_non_zero(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], transcript: Path
) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("GITHUB_TOKEN", "gh-test")
    _install_pipeline(monkeypatch, _FakePipeline(error=UpstreamError("boom")))

    code = cli.main(["process", "--transcript-file", str(transcript)])

    assert code == 1
    assert "boom" in capsys.readouterr().err


def test_missing_transcript_file_exits_non_zero(
    capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    code = cli.main(["process", "--transcript-file", str(tmp_path / "missing.txt")])

    assert code == 1
    assert "missing.txt" in capsys.readouterr().err
