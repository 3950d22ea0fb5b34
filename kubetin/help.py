"""The keybinding help overlay."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass

KEY_WIDTH = 14
DESC_WIDTH = 40
RULE_WIDTH = 56

TITLE = " kubetin · keybindings "
FOOTER = " press ? or Esc to close"


@dataclass(frozen=True)
class HelpGroup:
    """One titled section of the help overlay: (key, description) pairs."""

    title: str
    bindings: tuple[tuple[str, str], ...]


HELP_GROUPS: tuple[HelpGroup, ...] = (
    HelpGroup(
        "Move",
        (
            ("j / ↓", "next row"),
            ("k / ↑", "previous row"),
            ("g", "first row"),
            ("G", "last row"),
        ),
    ),
    HelpGroup(
        "Cluster",
        (
            ("Tab", "next reachable cluster"),
            ("Shift-Tab", "previous reachable cluster"),
        ),
    ),
    HelpGroup(
        "View",
        (
            ("F1", "fleet overview"),
            ("1", "pods"),
            ("2", "deployments"),
            ("3", "nodes"),
            ("4", "events"),
            ("5", "namespaces"),
        ),
    ),
    HelpGroup(
        "Filter",
        (
            ("/", "filter pods by name / namespace"),
            ("n", "namespace picker"),
            ("0", "all namespaces"),
            ("Esc", "clear filter / namespace"),
        ),
    ),
    HelpGroup(
        "Sort",
        (
            ("s", "cycle sort column"),
            ("S", "reverse sort direction"),
        ),
    ),
    HelpGroup(
        "Inspect",
        (
            ("Enter", "action menu (Describe / Logs / Exec / Events / Cordon / Drain / Delete)"),
            ("d", "describe selected resource"),
            ("Shift-Y", "(inside Secret describe) reveal data"),
        ),
    ),
    HelpGroup(
        "Logs (when open)",
        (
            ("/", "search log buffer"),
            ("n / N", "next / previous match"),
            ("f", "toggle follow"),
            ("g / G", "top / bottom"),
        ),
    ),
    HelpGroup(
        "System",
        (
            ("?", "this help"),
            ("R", "RBAC permissions overlay"),
            ("F2", "debug overlay"),
            ("q / Ctrl-C", "quit"),
        ),
    ),
)


def _binding_lines(key: str, desc: str) -> list[str]:
    key_cell = (" " + key).ljust(KEY_WIDTH)
    wrapped = textwrap.wrap(desc, DESC_WIDTH) or [""]
    indent = " " * (KEY_WIDTH + 1)
    lines = [key_cell + " " + wrapped[0].ljust(DESC_WIDTH)]
    lines.extend(indent + part.ljust(DESC_WIDTH) for part in wrapped[1:])
    return lines


def help_lines(build: str = "") -> list[str]:
    """The help overlay as plain text lines; the build line is shown when given."""
    lines = [TITLE, "─" * RULE_WIDTH]
    for group in HELP_GROUPS:
        lines.append("")
        lines.append(" " + group.title)
        for key, desc in group.bindings:
            lines.extend(_binding_lines(key, desc))
    if build:
        lines.append("")
        lines.append(" " + build)
    lines.append("")
    lines.append(FOOTER)
    return lines