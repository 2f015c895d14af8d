"""Parse rule documents with YAML front matter."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator

from hustler_rules.constants import FRONTMATTER_PREVIEW_LINES
from hustler_rules.errors import FrontmatterParseError
from hustler_rules.rules.models import RuleDocument, RuleMetadata

_FRONTMATTER_RE = re.compile(r"\A---\s*\n(.*?\n)---\s*\n", re.DOTALL)
_SCHEMA_PATH = Path(__file__).resolve().parent / "schema.json"
_VALIDATOR: Draft202012Validator | None = None


def _frontmatter_validator() -> Draft202012Validator:
    global _VALIDATOR
    if _VALIDATOR is None:
        schema = json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))
        _VALIDATOR = Draft202012Validator(schema)
    return _VALIDATOR


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def frontmatter_preview(frontmatter: str) -> list[str]:
    return frontmatter.splitlines()[:FRONTMATTER_PREVIEW_LINES]


def parse_metadata(path: Path, frontmatter: str) -> RuleMetadata:
    preview = frontmatter_preview(frontmatter)
    try:
        raw = yaml.safe_load(frontmatter)
    except yaml.YAMLError as exc:
        raise FrontmatterParseError(path, str(exc), preview) from exc
    if raw is None:
        raw = {}

    error = next(iter(_frontmatter_validator().iter_errors(raw)), None)
    if error is not None:
        raise FrontmatterParseError(path, format_schema_error(error), preview)

    return RuleMetadata(
        dependencies=list(raw.get("dependencies") or []),
        examples=list(raw.get("examples") or []),
    )


def parse_rule_document(path: Path, root: Path) -> RuleDocument:
    """Read ``path`` and parse its front matter, if any.

    Documents without a leading ``---`` block come back with ``metadata=None``.
    Raises ``FrontmatterParseError`` when the block is not valid YAML or does
    not match the front-matter schema.
    """
    text = path.read_text(encoding="utf-8")
    relative_path = path.relative_to(root).as_posix()

    match = _FRONTMATTER_RE.match(text)
    if match is None:
        return RuleDocument(relative_path=relative_path, source_path=path, text=text)

    frontmatter = match.group(1)
    return RuleDocument(
        relative_path=relative_path,
        source_path=path,
        text=text,
        frontmatter=frontmatter,
        metadata=parse_metadata(path, frontmatter),
    )
