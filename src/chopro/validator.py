"""Strict validation of parsed documents.

The parser is permissive: malformed constructs become incomplete nodes
instead of errors. Callers that need strict input use :func:`validate` to
turn those nodes into a list of issues, or into a
:class:`~chopro.exceptions.ValidationError` with ``strict=True``.
"""

from dataclasses import dataclass, field

from .directives import lookup
from .exceptions import ValidationError
from .kinds import ArgumentShape
from .models import Document, IncompleteChord, IncompleteDirective, ParseStatus


@dataclass
class ValidationIssue:
    """One incomplete construct found in a document."""

    line_number: int  # 1-based
    status: ParseStatus  # INCOMPLETE_DIRECTIVE or INCOMPLETE_CHORD
    text: str  # raw captured text
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclass
class ValidationResult:
    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    metrics: dict[str, int] = field(default_factory=dict)


def validate(document: Document, strict: bool = False) -> ValidationResult:
    """Collect the incomplete constructs of *document*.

    Raises :class:`~chopro.exceptions.ValidationError` when *strict* is set
    and any issue is found.
    """
    issues = [_issue(number, node) for number, node in document.incomplete()]
    metrics = {
        "lines": len(document),
        "directives": len(document.directives()),
        "incomplete_directives": sum(
            1 for issue in issues if issue.status is ParseStatus.INCOMPLETE_DIRECTIVE
        ),
        "incomplete_chords": sum(
            1 for issue in issues if issue.status is ParseStatus.INCOMPLETE_CHORD
        ),
    }
    if strict and issues:
        raise ValidationError(issues)
    return ValidationResult(valid=not issues, issues=issues, metrics=metrics)


def _issue(number: int, node: IncompleteDirective | IncompleteChord) -> ValidationIssue:
    if isinstance(node, IncompleteChord):
        return ValidationIssue(
            number, ParseStatus.INCOMPLETE_CHORD, node.text, f"unterminated chord [{node.text}"
        )
    return ValidationIssue(
        number, ParseStatus.INCOMPLETE_DIRECTIVE, node.text, _directive_message(node)
    )


def _directive_message(node: IncompleteDirective) -> str:
    if not node.closed:
        return f"unterminated directive {{{node.text}"
    name = node.text.split(":", 1)[0].strip()
    kind = lookup(name)
    if kind is None:
        return f"unknown directive {{{node.text}}}"
    if kind.shape is ArgumentShape.NONE:
        return f"{{{kind.value}}} takes no argument: {{{node.text}}}"
    return f"invalid {kind.shape.value} argument for {{{kind.value}}}: {{{node.text}}}"
