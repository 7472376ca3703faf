"""Command-line flags generated from configuration dataclasses.

Every field of a configuration record becomes a ``--flag`` whose type comes
from the field annotation and whose help text comes from the class
docstring's ``Attributes:`` section. Parsed defaults are ``None`` so that
``apply_overrides`` only touches values the user actually passed.
"""
from __future__ import annotations

import argparse
import dataclasses
import inspect
import re
import typing
from typing import Any, Dict, Optional

_ATTRIBUTE_RE = re.compile(r"^\s+(?P<name>\w+):\s*(?P<doc>.*)$")


def _parse_attribute_docs(config_cls: type) -> Dict[str, str]:
    """Map field name to its one-line description from the class docstring."""
    doc = inspect.getdoc(config_cls) or ""
    docs: Dict[str, str] = {}
    in_attributes = False
    for line in doc.splitlines():
        if line.strip() == "Attributes:":
            in_attributes = True
            continue
        if in_attributes:
            if line and not line[0].isspace():
                break
            match = _ATTRIBUTE_RE.match(line)
            if match:
                docs[match.group("name")] = match.group("doc").strip()
    return docs


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) is typing.Union:
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _add_argument_kwargs(annotation: Any) -> Dict[str, Any]:
    """``add_argument`` keyword arguments for a field annotation."""
    annotation = _unwrap_optional(annotation)
    origin = typing.get_origin(annotation)
    if annotation is bool:
        return {'action': argparse.BooleanOptionalAction}
    if origin in (list, typing.List):
        args = typing.get_args(annotation)
        item_type = args[0] if args else str
        return {'nargs': '*', 'type': item_type}
    if annotation in (int, float, str):
        return {'type': annotation}
    raise TypeError(f"unsupported field annotation for a command-line flag: {annotation!r}")


def _dest(prefix: str, name: str) -> str:
    return prefix.replace('-', '_') + name


def build_parser(config_cls: type, parser: Optional[argparse.ArgumentParser] = None,
                 prefix: str = "") -> argparse.ArgumentParser:
    """Add one flag per dataclass field of ``config_cls``.

    Args:
        config_cls: Configuration dataclass
        parser: Parser to extend (a new one is created when None)
        prefix: Flag prefix, e.g. ``"wandb-"`` gives ``--wandb-project``

    Returns:
        The parser the flags were added to
    """
    if not dataclasses.is_dataclass(config_cls):
        raise TypeError(f"{config_cls!r} is not a dataclass")
    if parser is None:
        summary = (inspect.getdoc(config_cls) or config_cls.__name__).splitlines()[0]
        parser = argparse.ArgumentParser(description=summary)

    hints = typing.get_type_hints(config_cls)
    docs = _parse_attribute_docs(config_cls)
    group = parser.add_argument_group(config_cls.__name__)
    for field in dataclasses.fields(config_cls):
        kwargs = _add_argument_kwargs(hints[field.name])
        default = field.default
        if default is dataclasses.MISSING and field.default_factory is not dataclasses.MISSING:
            default = field.default_factory()
        help_text = docs.get(field.name, field.name.replace('_', ' '))
        if default is not dataclasses.MISSING:
            help_text = f"{help_text} (default: {default})"
        # argparse treats % as a format directive in help strings
        help_text = help_text.replace('%', '%%')
        group.add_argument(
            f"--{prefix}{field.name.replace('_', '-')}",
            dest=_dest(prefix, field.name),
            default=None,
            help=help_text,
            **kwargs,
        )
    return parser


def collect_overrides(config_cls: type, namespace: argparse.Namespace, prefix: str = "") -> Dict[str, Any]:
    """Values for ``config_cls`` fields that were given on the command line."""
    overrides = {}
    for field in dataclasses.fields(config_cls):
        value = getattr(namespace, _dest(prefix, field.name), None)
        if value is not None:
            overrides[field.name] = value
    return overrides


def apply_overrides(config: Any, namespace: argparse.Namespace, prefix: str = "") -> Any:
    """Return a new, re-validated record with the parsed flags applied."""
    overrides = collect_overrides(type(config), namespace, prefix)
    if not overrides:
        return config
    return dataclasses.replace(config, **overrides)
