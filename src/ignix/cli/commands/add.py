"""Add command: install components, templates or themes from the registry."""

from pathlib import Path

import click

from ignix.cli.error_boundary import command_error_boundary
from ignix.cli.json_output import AddResponse, emit_json
from ignix.core.context import IgnixContext, InstallSession, create_session
from ignix.core.installation import InstallationRequest, InstallationResult, parse_namespace
from ignix.core.prompter import Choice, Prompter
from ignix.core.registry.types import AssetKind, RegistryEntry
from ignix.core.scoped_cwd import ScopedCwd


def build_lookup(entries: list[RegistryEntry]) -> dict[str, RegistryEntry]:
    """Map lowercased id and lowercased name of every entry to the entry.

    Either key resolves the same entry. When two entries share a key, the
    first one in registry order wins.
    """
    lookup: dict[str, RegistryEntry] = {}
    for entry in entries:
        if entry.id is not None:
            lookup.setdefault(entry.id.lower(), entry)
        lookup.setdefault(entry.name.lower(), entry)
    return lookup


def _prompt_choices(kind: AssetKind, entries: list[RegistryEntry]) -> list[Choice]:
    if kind is AssetKind.TEMPLATE:
        return [
            Choice(title=f"{entry.name} - {entry.description}", value=entry.identifier)
            for entry in entries
        ]
    return [Choice(title=entry.name, value=entry.identifier) for entry in entries]


def select_identifiers(
    request: InstallationRequest,
    entries: list[RegistryEntry],
    prompter: Prompter,
) -> list[str]:
    """Return the identifiers to install, prompting for one when none were given.

    No prompt is shown in non-interactive mode (``--yes`` or ``--json``);
    the result is then simply empty.
    """
    if request.identifiers:
        return list(request.identifiers)
    if not request.interactive:
        return []

    selected = prompter.select(
        f"Select a {request.kind.value} to add:", _prompt_choices(request.kind, entries)
    )
    if selected is None:
        return []
    return [selected.lower()]


def _install_entry(
    session: InstallSession, kind: AssetKind, entry: RegistryEntry
) -> list[str] | None:
    """Install one resolved entry; return its packages, or None if it can't be installed.

    Component-namespace entries are dispatched strictly on ``files.main.type``.
    The resolved entry itself is installed, except that a template listed in
    the component registry is looked up again in the template registry, which
    owns its files.
    """
    feedback = session.feedback

    if kind is AssetKind.TEMPLATE:
        feedback.info(f"Installing: {entry.identifier} (type: template)")
        return session.templates.install_entry(entry)

    if kind is AssetKind.THEME:
        feedback.info(f"Installing: {entry.identifier} (type: theme)")
        return session.themes.install_entry(entry)

    main_type = entry.main_type
    feedback.info(f"Installing: {entry.identifier} (type: {main_type})")
    if main_type == "component":
        return session.components.install_entry(entry)
    if main_type == "template":
        return session.templates.install(entry.identifier)

    feedback.error(f"Unknown type '{main_type}' for '{entry.identifier}'")
    return None


def run_add(
    session: InstallSession, prompter: Prompter, request: InstallationRequest
) -> InstallationResult:
    """Resolve and install the requested identifiers, strictly in order.

    Lookup misses and unresolvable entry types are recorded as skipped and
    processing continues. Installer failures propagate: once an asset has
    started installing, disk or package state may already have changed.
    """
    result = InstallationResult()
    entries = session.registry.list_entries(request.kind)
    identifiers = select_identifiers(request, entries, prompter)
    result.requested.extend(identifiers)

    if not identifiers:
        session.feedback.warning(f"No {request.kind.value} selected. Exiting.")
        return result

    lookup = build_lookup(entries)
    for identifier in identifiers:
        entry = lookup.get(identifier)
        if entry is None:
            session.feedback.error(
                f"{request.kind.value.capitalize()} '{identifier}' not found in the registry."
            )
            result.skipped.append(identifier)
            continue

        packages = _install_entry(session, request.kind, entry)
        if packages is None:
            result.skipped.append(identifier)
            continue

        result.installed.append(entry.identifier)
        result.add_dependencies(packages, exclude={entry.identifier, entry.name.lower()})

    return result


def _report(session: InstallSession, result: InstallationResult) -> None:
    if session.json_mode:
        response = AddResponse(
            requested=result.requested,
            installed=result.installed,
            dependencies=result.dependencies,
            skipped=result.skipped,
        )
        emit_json(response.model_dump(mode="json"))
        return

    feedback = session.feedback
    if result.installed:
        feedback.success(f"✓ Installed: {', '.join(result.installed)}")
    if result.dependencies:
        feedback.info(f"  Dependencies: {', '.join(result.dependencies)}")
    if result.skipped:
        feedback.warning(f"Skipped: {', '.join(result.skipped)}")


@click.command("add")
@click.argument("namespace")
@click.argument("identifiers", nargs=-1)
@click.option("-y", "--yes", is_flag=True, help="Skip prompts.")
@click.option(
    "--json",
    "json_mode",
    is_flag=True,
    help="Suppress human output and print a single JSON document.",
)
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project directory to install into.",
)
@click.pass_obj
@command_error_boundary
def add_cmd(
    ctx: IgnixContext,
    namespace: str,
    identifiers: tuple[str, ...],
    yes: bool,
    json_mode: bool,
    cwd: Path,
) -> None:
    """Add components, templates or themes to your project.

    NAMESPACE is one of component(s), template(s) or theme(s).

    Examples:

        # Add two components
        ignix add component button card

        # Machine-readable output, no prompts
        ignix add component button --json --cwd ./web
    """
    request = InstallationRequest(
        kind=parse_namespace(namespace),
        identifiers=tuple(identifier.lower() for identifier in identifiers),
        yes=yes,
        json=json_mode,
        cwd=cwd.resolve(),
    )

    with ScopedCwd(request.cwd) as project_dir:
        session = create_session(ctx, project_dir, json_mode=json_mode)
        result = run_add(session, ctx.prompter, request)
        _report(session, result)
