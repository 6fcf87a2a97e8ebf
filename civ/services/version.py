"""Version service: environment snapshot -> resolved version -> manifest.

Nothing is written unless resolution succeeds.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from civ.core.config import Config
from civ.core.result import Err, Ok, Result
from civ.output.console import ConsoleProtocol, Style
from civ.services.manifest import read_manifest_version, write_manifest_version
from civ.services.outputs import write_step_outputs
from civ.version.context import BuildNumberError, Context, context_from_environment
from civ.version.errors import VersionError
from civ.version.resolver import resolve
from civ.version.semver import InvalidVersionError

__all__ = ["ResolvedVersion", "VersionService"]


@dataclass(frozen=True, slots=True)
class ResolvedVersion:
    base_version: str
    version: str
    dist_tag: str | None
    context: Context
    manifest_path: Path
    changed: bool = False

    def step_outputs(self) -> dict[str, str]:
        outputs = {"version": self.version}
        if self.dist_tag:
            outputs["dist-tag"] = self.dist_tag
        return outputs


class VersionService:
    def __init__(
        self,
        *,
        root: Path,
        config: Config,
        environ: Mapping[str, str | None],
        console: ConsoleProtocol,
    ) -> None:
        self._root = root
        self._config = config
        self._environ = environ
        self._console = console

    @property
    def manifest_path(self) -> Path:
        return self._root / self._config.manifest.path

    def context(self) -> Result[Context, VersionError]:
        try:
            return Ok(context_from_environment(self._environ, self._config.env))
        except BuildNumberError as e:
            return Err(
                VersionError(
                    kind="invalid_environment",
                    message=str(e),
                    hint=f"{e.name} must be a base-10 integer",
                )
            )

    def compute(self) -> Result[ResolvedVersion, VersionError]:
        """Resolve the version without touching any file."""
        base = read_manifest_version(self.manifest_path)
        if isinstance(base, Err):
            return base

        context = self.context()
        if isinstance(context, Err):
            return context

        try:
            result = resolve(base.value, context.value)
        except InvalidVersionError as e:
            return Err(
                VersionError(
                    kind="invalid_version",
                    message=f"{self.manifest_path.name}: {e}",
                    hint="expected MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]",
                )
            )

        if result.version is None:
            return Err(
                VersionError(
                    kind="unresolved",
                    message=result.error or "No version generated",
                )
            )

        return Ok(
            ResolvedVersion(
                base_version=base.value,
                version=result.version,
                dist_tag=result.dist_tag,
                context=context.value,
                manifest_path=self.manifest_path,
            )
        )

    def apply(self, *, dry_run: bool = False) -> Result[ResolvedVersion, VersionError]:
        """Resolve, then write the manifest and the step outputs."""
        computed = self.compute()
        if isinstance(computed, Err):
            return computed

        resolved = computed.value
        if dry_run:
            self._console.print(
                f"dry-run: would update package version to {resolved.version}", Style.DIM
            )
            return Ok(resolved)

        self._console.print(f"Updating package version to {resolved.version}")
        written = write_manifest_version(resolved.manifest_path, resolved.version)
        if isinstance(written, Err):
            return written
        resolved = replace(resolved, changed=written.value)

        output_file = self._environ.get(self._config.outputs.file_env)
        if output_file:
            emitted = write_step_outputs(Path(output_file), resolved.step_outputs())
            if isinstance(emitted, Err):
                return emitted

        return Ok(resolved)
