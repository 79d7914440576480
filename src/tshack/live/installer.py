"""Dependency installation for the shared scripts folder."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from pathlib import Path

import typer
from result import Err, Ok, Result

from tshack.common import create_logger

from .models import InstallError

logger = create_logger("live.installer")

MANIFEST_FILENAME = "package.json"
DEFAULT_MANIFEST: dict[str, object] = {
    "name": "tshack-scripts",
    "private": True,
    "type": "module",
}


class DependencyInstaller:
    """Adds packages to ``directory`` with the configured package manager."""

    def __init__(self, package_manager: str, directory: Path) -> None:
        self.package_manager = package_manager
        self.directory = directory

    @property
    def manifest_path(self) -> Path:
        return self.directory / MANIFEST_FILENAME

    def ensure_manifest(self) -> Path:
        if not self.manifest_path.exists():
            self.directory.mkdir(parents=True, exist_ok=True)
            self.manifest_path.write_text(json.dumps(DEFAULT_MANIFEST, indent=2) + "\n", encoding="utf-8")
            logger.debug("Manifest created", path=str(self.manifest_path))
        return self.manifest_path

    def declared_packages(self) -> set[str]:
        try:
            manifest = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            return set()
        if not isinstance(manifest, dict):
            return set()

        declared: set[str] = set()
        for section in ("dependencies", "devDependencies"):
            entries = manifest.get(section)
            if isinstance(entries, dict):
                declared.update(entries)
        return declared

    def missing_packages(self, packages: Iterable[str]) -> list[str]:
        declared = self.declared_packages()
        return [package for package in packages if package not in declared]

    async def install(self, packages: Iterable[str]) -> Result[None, InstallError]:
        names = list(packages)
        if not names:
            return Ok(None)

        try:
            self.ensure_manifest()
        except OSError as e:
            return Err(InstallError(packages=names, message=f"Failed to create {MANIFEST_FILENAME}: {e}"))

        typer.secho(
            f"Installing dependencies in scripts directory: {', '.join(names)}...",
            fg=typer.colors.YELLOW,
        )
        command = [self.package_manager, "add", *names]
        logger.info("Installing script dependencies", command=command, cwd=str(self.directory))

        try:
            process = await asyncio.create_subprocess_exec(*command, cwd=self.directory)
        except (FileNotFoundError, PermissionError):
            return Err(InstallError(packages=names, message=f"{self.package_manager} command not found"))

        returncode = await process.wait()
        if returncode != 0:
            logger.warning("Dependency install failed", command=command, returncode=returncode)
            return Err(
                InstallError(
                    packages=names,
                    returncode=returncode,
                    message=f"'{' '.join(command)}' exited with status {returncode}",
                )
            )

        logger.debug("Dependencies installed", packages=names)
        return Ok(None)
