"""CLI entry point for mono-repos."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from .errors import MonoError
from .toml import CONFIG_FILE, load_config
from .workspace import Operation, Workspace


def _run(
    workspace: Workspace, operation: Operation, package: str | None, *args: Any
) -> None:
    """Run an operation on one package or on all of them, exiting 1 on failure."""
    try:
        if package is None:
            ok = workspace.each(operation, *args)
        else:
            if not workspace.resolve(package).is_dir():
                raise click.ClickException(f"Unknown package: {package}")
            ok = getattr(workspace.repo(package), operation.value)(*args)
    except MonoError as exc:
        raise click.ClickException(str(exc)) from exc

    if not ok:
        raise click.ClickException(f"{operation.value} failed")
    click.echo(f"\n✓ {operation.value} complete")


package_argument = click.argument("package", required=False)


@click.group()
@click.version_option(package_name="mono-repos")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Monorepo root containing the packages/ directory.",
)
@click.option("--silent", is_flag=True, help="Hide npm output.")
@click.pass_context
def cli(ctx: click.Context, root: Path, silent: bool) -> None:
    """Release and link the packages of a monorepo."""
    try:
        options = load_config(root / CONFIG_FILE)
    except MonoError as exc:
        raise click.ClickException(str(exc)) from exc
    if silent:
        options["silent"] = True
    ctx.obj = Workspace(root, options)


@cli.command()
@package_argument
@click.pass_obj
def install(workspace: Workspace, package: str | None) -> None:
    """Install dependencies and register packages for linking."""
    _run(workspace, Operation.INSTALL, package)


@cli.command()
@package_argument
@click.pass_obj
def uninstall(workspace: Workspace, package: str | None) -> None:
    """Remove installed dependencies."""
    _run(workspace, Operation.UNINSTALL, package)


@cli.command()
@package_argument
@click.pass_obj
def test(workspace: Workspace, package: str | None) -> None:
    """Run the test script of each package."""
    _run(workspace, Operation.TEST, package)


@cli.command()
@package_argument
@click.pass_obj
def link(workspace: Workspace, package: str | None) -> None:
    """Symlink packages that depend on each other."""
    _run(workspace, Operation.LINK, package)


@cli.command()
@click.pass_obj
def verify(workspace: Workspace) -> None:
    """Check that the local branch is up to date with the remote."""
    if not workspace.verify():
        raise click.ClickException("Local branch is behind the remote")
    click.echo("✓ Up to date")


@cli.command()
@package_argument
@click.option(
    "-r",
    "--release",
    type=click.Choice(["major", "minor", "patch"], case_sensitive=False),
    default=None,
    help="Which part of the version to bump. (default: patch)",
)
@click.option("--version", "version", default=None, help="Exact version to release.")
@click.option("-m", "--message", default=None, help="Extra release message.")
@click.option(
    "--verify", "check_remote", is_flag=True, help="Refuse to release if behind remote."
)
@click.pass_obj
def publish(
    workspace: Workspace,
    package: str | None,
    release: str | None,
    version: str | None,
    message: str | None,
    check_remote: bool,
) -> None:
    """Bump, commit, tag, push and publish packages."""
    if check_remote and not workspace.verify():
        raise click.ClickException("Local branch is behind the remote")

    flags = {"release": release, "version": version, "message": message}
    options = {k: v for k, v in flags.items() if v is not None}
    _run(workspace, Operation.PUBLISH, package, options)
