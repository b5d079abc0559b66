"""Rules and the rule processors that hold them."""

from __future__ import annotations

from dataclasses import dataclass, field

RULE_KINDS = frozenset({"igual_a", "menor_que", "maior_que", "entre", "fora"})


@dataclass(frozen=True)
class Rule:
    """A rule of a given kind with one or two parameters."""

    kind: str
    rule_id: int
    x: int
    y: int = 0


@dataclass
class Processor:
    """A rule processor that issues a command to devices."""

    component_id: int
    command: str
    rules: list[Rule] = field(default_factory=list)

    kind = "p"

    def add_rule(self, rule: Rule) -> None:
        """Append a rule to this processor."""
        self.rules.append(rule)

    def process_rules(self) -> bool:
        """Return whether the first rule is of a known kind."""
        if not self.rules:
            return False
        return self.rules[0].kind in RULE_KINDS

    def set_command(self, command: str) -> None:
        """Replace the command this processor issues."""
        self.command = command

    def __str__(self) -> str:
        return f"ID: {self.component_id}, regras: {len(self.rules)}"