"""
Naming and serialization helpers shared by the generator pipeline.
"""

import json
import re
from collections.abc import Callable
from typing import Any

# Words on camelCase boundaries, acronym runs and digit runs
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(text: Any) -> list[str]:
    """Split text into words, handling camelCase boundaries and separators.

    Examples:
        "petOwner" -> ["pet", "Owner"]
        "XMLHttpRequest" -> ["XML", "Http", "Request"]
        "in progress" -> ["in", "progress"]
        "v2_api" -> ["v", "2", "api"]
    """
    return _WORD_PATTERN.findall(str(text))


def snake_case(text: Any) -> str:
    """Convert text to snake_case ("PetOwner" -> "pet_owner")."""
    return "_".join(word.lower() for word in split_words(text))


def camel_case(text: Any) -> str:
    """Convert text to camelCase ("pet_owner" -> "petOwner")."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word.capitalize() for word in words[1:])


def upper_case(text: Any) -> str:
    """Convert text to space separated upper case words ("fooBar" -> "FOO BAR")."""
    return " ".join(word.upper() for word in split_words(text))


def identity(text: str) -> str:
    return text


ATTRIBUTE_CONVERTERS: dict[str, Callable[[str], str]] = {
    "none": identity,
    "camel": camel_case,
    "snake": snake_case,
}


def schema_name(model_name: str) -> str:
    """Canonical schema name used to reference and import a model."""
    return f"{model_name}Schema"


def change_format(obj: Any, transformer: Callable[[str], str]) -> Any:
    """Return a copy of a nested dict/list tree with every key transformed."""
    if isinstance(obj, dict):
        return {transformer(key): change_format(value, transformer) for key, value in obj.items()}
    if isinstance(obj, list):
        return [change_format(value, transformer) for value in obj]
    return obj


def object_to_template_value(obj: Any) -> str | None:
    """Dump a dependency tree as an unquoted, indented object literal."""
    if not isinstance(obj, (dict, list)):
        return None
    return json.dumps(obj, indent=2).replace('"', "")


def js_string(value: Any) -> str:
    """Single-quoted JavaScript string literal ("it's" -> 'it\\'s')."""
    escaped = str(value).replace("\\", "\\\\").replace("'", "\\'").replace("\n", "\\n").replace("\r", "\\r")
    return f"'{escaped}'"


def compact_template_value(obj: dict[str, str]) -> str:
    """Join a mapping of key to JavaScript expression into a single-line object literal."""
    return "{" + ",".join(f"{key}:{value}" for key, value in obj.items()) + "}"
