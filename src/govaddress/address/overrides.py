"""Per-entity line corrections applied before generic editing."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Identity = Tuple[str, str]


class EditOp(Enum):
    """Kinds of line edit."""

    REPLACE = "replace"  # whole line -> value
    SUBSTITUTE = "substitute"  # match substring -> value
    REMOVE = "remove"
    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    SPLIT = "split"  # whole line -> values


class MatchMode(Enum):
    """How a rule literal is compared with a line."""

    EQUALS = "equals"
    CONTAINS = "contains"
    STARTS_WITH = "starts_with"


@dataclass(frozen=True)
class LineEdit:
    """One tagged line edit."""

    op: EditOp
    match: str
    mode: MatchMode = MatchMode.EQUALS
    value: Optional[str] = None
    values: Tuple[str, ...] = ()
    remove_following: int = 0

    def matches(self, line: str) -> bool:
        """Check if this edit targets a line."""
        if self.mode is MatchMode.EQUALS:
            return line == self.match
        if self.mode is MatchMode.CONTAINS:
            return self.match in line
        return line.startswith(self.match)

    def apply(self, lines: Sequence[str]) -> List[str]:
        """
        Apply the edit to a line sequence.

        Lines that do not match are passed through. Inserts target the
        first matching line only and are skipped when the inserted lines
        are already in place.
        """
        if self.op in (EditOp.INSERT_BEFORE, EditOp.INSERT_AFTER):
            return self._insert(lines)

        result: List[str] = []
        skip = 0
        for line in lines:
            if skip:
                skip -= 1
                continue
            if not self.matches(line):
                result.append(line)
                continue

            if self.op is EditOp.REPLACE:
                result.append(self.value or "")
            elif self.op is EditOp.SUBSTITUTE:
                result.append(line.replace(self.match, self.value or ""))
            elif self.op is EditOp.SPLIT:
                result.extend(self.values)
            # REMOVE appends nothing

            if self.op in (EditOp.REPLACE, EditOp.SPLIT):
                skip = self.remove_following
        return result

    def _insert(self, lines: Sequence[str]) -> List[str]:
        result = list(lines)
        width = len(self.values)
        for idx, line in enumerate(result):
            if not self.matches(line):
                continue
            if self.op is EditOp.INSERT_BEFORE:
                if result[max(idx - width, 0) : idx] != list(self.values):
                    result[idx:idx] = self.values
            elif result[idx + 1 : idx + 1 + width] != list(self.values):
                result[idx + 1 : idx + 1] = self.values
            break
        return result

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        data: Dict[str, Any] = {"op": self.op.value, "match": self.match, "mode": self.mode.value}
        if self.value is not None:
            data["value"] = self.value
        if self.values:
            data["values"] = list(self.values)
        if self.remove_following:
            data["remove_following"] = self.remove_following
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LineEdit":
        """Build a LineEdit from a dictionary produced by to_dict()."""
        return cls(
            op=EditOp(data["op"]),
            match=data["match"],
            mode=MatchMode(data.get("mode", MatchMode.EQUALS.value)),
            value=data.get("value"),
            values=tuple(data.get("values", ())),
            remove_following=int(data.get("remove_following", 0)),
        )


class OverrideTable:
    """
    Read-only table of line edits keyed by entity identity.

    Built once and shared. A rule whose literal no longer appears in a
    page does nothing.
    """

    def __init__(self, rules: Optional[Mapping[Identity, Iterable[LineEdit]]] = None):
        frozen = {identity: tuple(edits) for identity, edits in (rules or {}).items()}
        self._rules: Mapping[Identity, Tuple[LineEdit, ...]] = MappingProxyType(frozen)

    @property
    def rules(self) -> Mapping[Identity, Tuple[LineEdit, ...]]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, identity: object) -> bool:
        return identity in self._rules

    def rules_for(self, identity: Identity) -> Tuple[LineEdit, ...]:
        """Get the edits for an entity, empty if it has none."""
        return self._rules.get(identity, ())

    def apply(self, identity: Identity, lines: Sequence[str]) -> List[str]:
        """
        Apply an entity's edits in order.

        Args:
            identity: (first_name, last_name)
            lines: Line sequence for one page

        Returns:
            New list of lines
        """
        result = list(lines)
        edits = self.rules_for(identity)
        for edit in edits:
            result = edit.apply(result)
        if edits:
            logger.debug("Applied %d overrides for %s %s", len(edits), *identity)
        return result

    def merged(self, other: "OverrideTable") -> "OverrideTable":
        """Combine two tables; for a shared identity, other's edits run after ours."""
        combined: Dict[Identity, Tuple[LineEdit, ...]] = dict(self._rules)
        for identity, edits in other.rules.items():
            combined[identity] = combined.get(identity, ()) + edits
        return OverrideTable(combined)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "OverrideTable":
        """
        Load a table from a JSON document.

        Document shape::

            {"rules": [{"first_name": "...", "last_name": "...",
                        "edits": [{"op": "replace", "match": "...", "value": "..."}]}]}
        """
        with open(path, "r") as f:
            raw = json.load(f)

        rules: Dict[Identity, Tuple[LineEdit, ...]] = {}
        for rule in raw.get("rules", []):
            identity = (rule["first_name"], rule["last_name"])
            edits = tuple(LineEdit.from_dict(edit) for edit in rule.get("edits", []))
            rules[identity] = rules.get(identity, ()) + edits
        return cls(rules)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the from_json() document shape."""
        return {
            "rules": [
                {
                    "first_name": first_name,
                    "last_name": last_name,
                    "edits": [edit.to_dict() for edit in edits],
                }
                for (first_name, last_name), edits in self._rules.items()
            ]
        }
