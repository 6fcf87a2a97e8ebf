from __future__ import annotations

import json
from pathlib import Path

import pytest
import typer

from civ.cli.commands._helpers import error_exit_code, escape_workflow_data
from civ.cli.context import CLIContext
from civ.core.config import Config
from civ.core.errors import ErrorCode
from civ.output.console import MockConsole
from civ.version.errors import VersionError

BRANCH_ENV = {"CI": "true", "GITHUB_REF": "refs/heads/wobble", "GITHUB_RUN_NUMBER": "34"}


def _ctx(
    tmp_path: Path,
    environ: dict[str, str | None],
    *,
    version: str = "1.0.0-local",
) -> CLIContext:
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "app", "version": version}), encoding="utf-8"
    )
    return CLIContext(root=tmp_path, config=Config(), environ=environ, console=MockConsole())


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


class TestApply:
    def test_updates_manifest(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(tmp_path, BRANCH_ENV)
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        apply_cmd.apply(dry_run=False)

        data = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert data["version"] == "1.0.0-wobble.34"
        assert "OK package.json: 1.0.0-wobble.34" in _console(ctx).messages

    def test_dry_run_leaves_manifest(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(tmp_path, BRANCH_ENV)
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        apply_cmd.apply(dry_run=True)

        data = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert data["version"] == "1.0.0-local"

    def test_unresolved_exits_with_version_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(tmp_path, {"CI": "true"})
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        with pytest.raises(typer.Exit) as exc:
            apply_cmd.apply(dry_run=False)

        assert exc.value.exit_code == int(ErrorCode.VERSION_ERROR)
        assert _console(ctx).has_error()
        assert "::error::" not in capsys.readouterr().err

    def test_github_actions_annotation(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(
            tmp_path,
            {"CI": "true", "GITHUB_ACTIONS": "true", "GITHUB_REF": "refs/tags/wibble"},
        )
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        with pytest.raises(typer.Exit):
            apply_cmd.apply(dry_run=False)

        assert "::error::Invalid semver tag: wibble" in capsys.readouterr().err

    def test_annotation_escapes_workflow_characters(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(
            tmp_path,
            {"CI": "true", "GITHUB_ACTIONS": "true", "GITHUB_REF": "refs/tags/100%\nbad"},
        )
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        with pytest.raises(typer.Exit):
            apply_cmd.apply(dry_run=False)

        err = capsys.readouterr().err
        assert "::error::Invalid semver tag: 100%25%0Abad\n" in err

    def test_bad_run_number_is_env_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import civ.cli.commands.apply as apply_cmd

        ctx = _ctx(tmp_path, {**BRANCH_ENV, "GITHUB_RUN_NUMBER": "x"})
        monkeypatch.setattr(apply_cmd, "build_context", lambda: ctx)

        with pytest.raises(typer.Exit) as exc:
            apply_cmd.apply(dry_run=False)

        assert exc.value.exit_code == int(ErrorCode.ENV_ERROR)
        assert _console(ctx).find("hint: GITHUB_RUN_NUMBER must be a base-10 integer")


class TestShow:
    def test_prints_version_and_dist_tag(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import civ.cli.commands.show as show_cmd

        ctx = _ctx(tmp_path, BRANCH_ENV)
        monkeypatch.setattr(show_cmd, "build_context", lambda: ctx)

        show_cmd.show(dist_tag=True)

        assert _console(ctx).messages == ["1.0.0-wobble.34", "dist-tag: wobble"]
        data = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
        assert data["version"] == "1.0.0-local"

    def test_missing_manifest_is_io_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import civ.cli.commands.show as show_cmd

        ctx = CLIContext(root=tmp_path, config=Config(), environ={}, console=MockConsole())
        monkeypatch.setattr(show_cmd, "build_context", lambda: ctx)

        with pytest.raises(typer.Exit) as exc:
            show_cmd.show(dist_tag=False)

        assert exc.value.exit_code == int(ErrorCode.IO_ERROR)


def test_context_command(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import civ.cli.commands.context_cmd as context_cmd

    ctx = _ctx(tmp_path, {"CI": "true", "GITHUB_REF": "refs/tags/v1.2.3"})
    monkeypatch.setattr(context_cmd, "build_context", lambda: ctx)

    context_cmd.context()

    assert _console(ctx).messages == [
        "CI context",
        "ci: yes",
        "branch: -",
        "tag: v1.2.3",
        "build: -",
    ]


@pytest.mark.parametrize(
    ("kind", "code"),
    [
        ("invalid_environment", ErrorCode.ENV_ERROR),
        ("invalid_version", ErrorCode.VERSION_ERROR),
        ("unresolved", ErrorCode.VERSION_ERROR),
        ("manifest_read", ErrorCode.IO_ERROR),
        ("manifest_invalid", ErrorCode.USER_ERROR),
        ("manifest_write", ErrorCode.IO_ERROR),
        ("output_write", ErrorCode.IO_ERROR),
    ],
)
def test_error_exit_codes(kind: str, code: ErrorCode) -> None:
    error = VersionError(kind=kind, message="boom")  # type: ignore[arg-type]
    assert error_exit_code(error) == int(code)


def test_escape_workflow_data() -> None:
    assert escape_workflow_data("plain") == "plain"
    assert escape_workflow_data("50%") == "50%25"
    assert escape_workflow_data("a\r\nb") == "a%0D%0Ab"
    assert escape_workflow_data("%0A") == "%250A"
