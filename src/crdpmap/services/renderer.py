# src/crdpmap/services/renderer.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from crdpmap.config import const
from crdpmap.domain import CommandDescriptor, ExtractedSchema, TypeRef


@dataclass(frozen=True, slots=True)
class RenderOptions:
    header: str = const.HEADER_BLOCK
    namespace: str = const.OUTPUT_TYPE_NAMESPACE
    global_module: str = const.OUTPUT_GLOBAL_MODULE
    events_name: str = const.OUTPUT_EVENTS_NAME
    commands_name: str = const.OUTPUT_COMMANDS_NAME


def _newline(level: int) -> str:
    return "\n" + const.INDENT * level


def _type_text(ref: Optional[TypeRef], options: RenderOptions) -> str:
    if ref is None:
        return const.VOID
    return f"{options.namespace}.{ref.qualified}"


def _params_text(command: CommandDescriptor, options: RenderOptions) -> str:
    text = _type_text(command.params, options)
    if command.params is not None and command.weak_params:
        return f"{const.VOID} | {text}"
    return text


def render_events(schema: ExtractedSchema, level: int, options: RenderOptions) -> str:
    out: List[str] = [_newline(level), f"export interface {options.events_name} {{"]
    for key, event in schema.events.items():
        out += [_newline(level + 1), f"'{key}': {_type_text(event.payload, options)};"]
    out += [_newline(level), "}"]
    return "".join(out)


def render_commands(schema: ExtractedSchema, level: int, options: RenderOptions) -> str:
    out: List[str] = [_newline(level), f"export interface {options.commands_name} {{"]
    for key, command in schema.commands.items():
        out += [
            _newline(level + 1),
            f"'{key}': {{",
            _newline(level + 2),
            f"paramsType: {_params_text(command, options)},",
            _newline(level + 2),
            f"returnType: {_type_text(command.returns, options)}",
            _newline(level + 1),
            "};",
        ]
    out += [_newline(level), "}"]
    return "".join(out)


def render(schema: ExtractedSchema, options: Optional[RenderOptions] = None) -> str:
    """
    Build the complete declaration file text. The input is assumed to be validated
    already; rendering never fails on shape.
    """
    options = options or RenderOptions()
    return "".join(
        [
            options.header,
            "\ndeclare global {",
            f"\n{const.INDENT}module {options.global_module} {{",
            render_events(schema, 2, options),
            "\n",
            render_commands(schema, 2, options),
            f"\n{const.INDENT}}}\n}}\n",
            "\n// empty export to keep file a module\nexport {}\n",
        ]
    )
