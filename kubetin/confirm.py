"""Typed-name confirmation before deleting an object."""

from __future__ import annotations

from dataclasses import dataclass, field

from kubetin.actions import ResourceRef

_CONFIRM_CHARS = 5


def expected_confirmation(name: str) -> str:
    """The text the user must retype: the name's last five characters, or all of it."""
    if len(name) <= _CONFIRM_CHARS:
        return name
    return name[-_CONFIRM_CHARS:]


@dataclass
class DeleteConfirm:
    """State of the delete confirmation prompt for one object.

    Once accepted the prompt is pending and ignores further typing.
    """

    ref: ResourceRef
    typed: str = ""
    pending: bool = False
    target: str = field(init=False)

    def __post_init__(self) -> None:
        self.target = expected_confirmation(self.ref.name)

    def type_text(self, text: str) -> None:
        """Append typed characters, unless already accepted."""
        if not self.pending:
            self.typed += text

    def backspace(self) -> None:
        """Remove the last typed character, unless already accepted."""
        if not self.pending:
            self.typed = self.typed[:-1]

    def matched(self) -> bool:
        """Whether the typed text equals the expected confirmation."""
        return self.typed == self.target

    def accept(self) -> bool:
        """Try to confirm; returns True and goes pending when the text matches."""
        if self.pending or not self.matched():
            return False
        self.pending = True
        return True

    @property
    def subject(self) -> str:
        """The 'Delete Kind/name in namespace' line shown in the prompt."""
        text = f" Delete {self.ref.kind}/{self.ref.name}"
        if self.ref.namespace:
            text += " in " + self.ref.namespace
        return text