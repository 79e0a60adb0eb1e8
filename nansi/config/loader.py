import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, TaskDescriptor, TaskList, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)

ITEM_KEYS = {"label", "exec", "args", "print_status", "print_output", "prerequisites"}


def load_task_list(path: str | Path) -> TaskList:
    source = str(path)
    pure_path = Path(path).expanduser()

    if not pure_path.exists():
        raise ConfigError(f"{source}: No such file or directory")

    if not pure_path.is_file():
        raise ConfigError(f"{source}: Not a file")

    fmt = _detect_format(pure_path)
    logger.debug("loading %s as %s", pure_path.resolve(), fmt)
    raw_file = _parse_file(pure_path, fmt)
    tasks = _build_tasks(source, raw_file)
    logger.debug("loaded %d item(s) from %s", len(tasks), source)
    return TaskList(tasks=tasks, source=source)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .json, .yml/.yaml, .toml"
            )


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = _read(path)
    match fmt:
        case "yaml":
            raw_file = _parse_yaml(path, text)
        case "toml":
            raw_file = _parse_toml(path, text)
        case "json":
            raw_file = _parse_json(path, text)
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _parse_yaml(path: Path, text: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc


def _parse_toml(path: Path, text: str) -> Any:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc


def _parse_json(path: Path, text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON: {exc}") from exc


def _build_tasks(source: str, raw: Mapping[str, Any]) -> tuple[TaskDescriptor, ...]:
    if "exec_list" not in raw:
        raise ConfigError(f"{source}: missing 'exec_list' field")

    exec_list = raw["exec_list"]
    if not isinstance(exec_list, list):
        raise ConfigError(f"{source}: 'exec_list' must be a list, got {type(exec_list)}")

    tasks = []
    for position, fields in enumerate(exec_list, start=1):
        where = f"{source}: item {position}"
        if not isinstance(fields, Mapping):
            raise ConfigError(f"{where} must be a mapping")
        tasks.append(_build_task(where, fields))

    return tuple(tasks)


def _build_task(where: str, fields: Mapping[str, Any]) -> TaskDescriptor:
    for key in fields.keys():
        if key not in ITEM_KEYS:
            raise ConfigError(f"{where}: Can't process: {key}")

    if "exec" not in fields:
        raise ConfigError(f"{where}: missing 'exec'")

    program = fields["exec"]
    if not isinstance(program, str):
        raise ConfigError(f"{where}: 'exec' should be a string")

    if len(program.strip()) < 1:
        raise ConfigError(f"{where}: 'exec' is empty")

    label = fields.get("label", "")
    if not isinstance(label, str):
        raise ConfigError(f"{where}: 'label' should be a string")

    arguments = _string_list(where, "args", fields.get("args", []))
    report_status = _flag(where, "print_status", fields.get("print_status", True))
    report_output = _flag(where, "print_output", fields.get("print_output", False))

    prerequisites = []
    seen = set()
    for prereq in _string_list(where, "prerequisites", fields.get("prerequisites", [])):
        # Prerequisites form an ordered set
        if prereq in seen:
            continue
        prerequisites.append(prereq)
        seen.add(prereq)

    return TaskDescriptor(
        program=program,
        label=label,
        arguments=tuple(arguments),
        report_status=report_status,
        report_output=report_output,
        prerequisites=tuple(prerequisites),
    )


def _string_list(where: str, key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{where}: '{key}' should be a list")

    for item in value:
        if not isinstance(item, str):
            raise ConfigError(f"{where}: {item!r} should be a string in '{key}'")

    return list(value)


def _flag(where: str, key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{where}: '{key}' should be a boolean")
    return value
