"""List command: show what the registry offers."""

from collections import defaultdict
from pathlib import Path

import click

from ignix.cli.error_boundary import command_error_boundary
from ignix.cli.json_output import ListResponse, emit_json
from ignix.cli.output import user_output
from ignix.core.context import IgnixContext, create_session
from ignix.core.installation import parse_namespace
from ignix.core.registry.client import RegistryClient
from ignix.core.registry.types import AssetKind, RegistryEntry
from ignix.core.scoped_cwd import ScopedCwd


def sorted_identifiers(kind: AssetKind, entries: list[RegistryEntry]) -> list[str]:
    """Sorted lowercased keys for JSON output.

    Components are listed by name; templates and themes by id (entries
    without an id are left out).
    """
    if kind is AssetKind.COMPONENT:
        return sorted(entry.name.lower() for entry in entries)
    return sorted(entry.id.lower() for entry in entries if entry.id)


def _list_entries(registry: RegistryClient, kind: AssetKind) -> list[RegistryEntry]:
    listers = {
        AssetKind.COMPONENT: registry.list_components,
        AssetKind.TEMPLATE: registry.list_templates,
        AssetKind.THEME: registry.list_themes,
    }
    return listers[kind]()


def _render_entry(entry: RegistryEntry, indent: str = "") -> str:
    name = click.style(entry.name, fg="cyan")
    if entry.id:
        return f"{indent}- {name} ({entry.id}): {entry.description}"
    return f"{indent}- {name}: {entry.description}"


def _render_human(kind: AssetKind, entries: list[RegistryEntry]) -> None:
    if not entries:
        user_output(click.style(f"No {kind.collection_key} found in the registry.", fg="yellow"))
        return

    user_output(click.style(f"Available {kind.collection_key.capitalize()}:", bold=True))

    if kind is not AssetKind.TEMPLATE:
        for entry in entries:
            user_output(_render_entry(entry))
        return

    by_category: dict[str, list[RegistryEntry]] = defaultdict(list)
    for entry in entries:
        by_category[entry.category or "Uncategorized"].append(entry)
    for category, category_entries in by_category.items():
        user_output(click.style(f"{category}:", fg="bright_yellow"))
        for entry in category_entries:
            user_output(_render_entry(entry, indent="  "))


@click.command("list")
@click.argument("namespace")
@click.option(
    "--json",
    "json_mode",
    is_flag=True,
    help="Print the sorted identifiers as a single JSON document.",
)
@click.option(
    "--cwd",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Project directory whose config selects the registry.",
)
@click.pass_obj
@command_error_boundary
def list_cmd(ctx: IgnixContext, namespace: str, json_mode: bool, cwd: Path) -> None:
    """List available components, templates or themes from the registry."""
    kind = parse_namespace(namespace)

    with ScopedCwd(cwd.resolve()) as project_dir:
        session = create_session(ctx, project_dir, json_mode=json_mode)
        entries = _list_entries(session.registry, kind)

    if json_mode:
        response = ListResponse(**{kind.collection_key: sorted_identifiers(kind, entries)})
        emit_json(response.model_dump(mode="json", exclude_none=True))
        return

    _render_human(kind, entries)
