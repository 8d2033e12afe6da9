"""Typed GraphQL document builder shared by all Loco operations.

A document is one root field (``products``, ``productTranslationDelete``, ...)
wrapped in a named query or mutation, with typed variables and a nested field
selection. Selections use the same nesting convention as the JS
``gql-query-builder`` package: a field is either a name or a mapping from a
name to its own selection::

    ["status", {"errors": ["code", "message"]}]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal, Mapping, Sequence, Tuple, Union

FieldSpec = Union[str, Mapping[str, Sequence[Any]]]
OperationType = Literal["query", "mutation"]

_INDENT = "  "


@dataclass(frozen=True)
class GraphQLVariable:
    """A single operation variable and its GraphQL type.

    ``required`` adds the outer non-null marker. ``is_list`` wraps the type
    as a list of non-null items, so ``type="GlossaryItemInput", is_list=True,
    required=True`` declares ``[GlossaryItemInput!]!``.
    """

    name: str
    value: Any
    type: str
    required: bool = False
    is_list: bool = False

    @property
    def type_ref(self) -> str:
        type_ref = f"[{self.type}!]" if self.is_list else self.type
        return f"{type_ref}!" if self.required else type_ref

    @property
    def definition(self) -> str:
        return f"${self.name}: {self.type_ref}"


@dataclass(frozen=True)
class GraphQLDocument:
    """Immutable GraphQL operation ready to be sent over HTTP."""

    operation_type: OperationType
    operation: str
    fields: Tuple[FieldSpec, ...]
    variables: Tuple[GraphQLVariable, ...] = ()

    @property
    def operation_name(self) -> str:
        return self.operation[:1].upper() + self.operation[1:]

    @property
    def text(self) -> str:
        header = f"{self.operation_type} {self.operation_name}"
        call = self.operation
        if self.variables:
            header += "(" + ", ".join(v.definition for v in self.variables) + ")"
            call += "(" + ", ".join(f"{v.name}: ${v.name}" for v in self.variables) + ")"

        lines = [header + " {", f"{_INDENT}{call} {{"]
        lines.extend(_render_fields(self.fields, depth=2))
        lines.append(f"{_INDENT}}}")
        lines.append("}")
        return "\n".join(lines)

    def variable_values(self) -> Dict[str, Any]:
        # null values are kept: an explicit null differs from an omitted variable
        return {v.name: v.value for v in self.variables}

    def to_payload(self) -> Dict[str, Any]:
        """GraphQL-over-HTTP request body."""
        return {
            "operationName": self.operation_name,
            "query": self.text,
            "variables": self.variable_values(),
        }


def _render_fields(fields: Iterable[FieldSpec], depth: int) -> List[str]:
    indent = _INDENT * depth
    lines: List[str] = []
    for spec in fields:
        if isinstance(spec, str):
            lines.append(f"{indent}{spec}")
            continue
        for name, children in spec.items():
            lines.append(f"{indent}{name} {{")
            lines.extend(_render_fields(children, depth + 1))
            lines.append(f"{indent}}}")
    return lines


def query(
    operation: str,
    fields: Sequence[FieldSpec],
    variables: Sequence[GraphQLVariable] = (),
) -> GraphQLDocument:
    return GraphQLDocument("query", operation, tuple(fields), tuple(variables))


def mutation(
    operation: str,
    fields: Sequence[FieldSpec],
    variables: Sequence[GraphQLVariable] = (),
) -> GraphQLDocument:
    return GraphQLDocument("mutation", operation, tuple(fields), tuple(variables))


def page_info_fields() -> List[FieldSpec]:
    return ["hasNextPage", "endCursor", "count", "total"]


def action_fields() -> List[FieldSpec]:
    return ["status", {"errors": ["code", "message"]}]
