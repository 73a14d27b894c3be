"""
Typed option schema and validation.

Each option declares an expected type, a default and an optional semantic
rule. Type mismatches are recoverable (the default is used and a warning
logged); a failing semantic rule raises ConfigurationError, since silently
defaulting would hide an operator mistake.
"""
from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union
import logging

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)

Rule = Callable[[str, Any, Mapping[str, Any]], Any]


@dataclass(frozen=True)
class Option:
    """Schema entry: expected type, default value and semantic rule."""
    expected_type: Union[type, Tuple[type, ...]]
    default: Any
    rule: Optional[Rule] = None

    @property
    def type_name(self) -> str:
        types = self.expected_type if isinstance(self.expected_type, tuple) else (self.expected_type,)
        return " or ".join(t.__name__ for t in types)

    def accepts(self, value: Any) -> bool:
        types = self.expected_type if isinstance(self.expected_type, tuple) else (self.expected_type,)
        # bool is an int subclass, but True is never a valid size or level
        if isinstance(value, bool) and bool not in types:
            return False
        return isinstance(value, types)


def validate_options(raw: Mapping[str, Any], schema: Mapping[str, Option]) -> Dict[str, Any]:
    """
    Validate a raw option mapping against a schema.

    Args:
        raw: Option name -> value, as loaded from a config file
        schema: Option name -> Option, in validation order

    Returns:
        New dict holding exactly the schema's keys with validated,
        normalized values

    Raises:
        ConfigurationError: If any value fails its semantic rule
    """
    if not isinstance(raw, Mapping):
        raise ConfigurationError("<config>", f"expected a mapping of options, got {type(raw).__name__}")

    for key in raw:
        if key not in schema:
            logger.warning(f"Unknown configuration option {key!r} ignored")

    validated: Dict[str, Any] = {}
    for key, option in schema.items():
        if key not in raw:
            logger.info(f"Missing option {key}, defaulting to {option.default!r}")
            value = deepcopy(option.default)
        elif not option.accepts(raw[key]):
            logger.warning(
                f"Invalid value for option {key}: expected {option.type_name} "
                f"but got {type(raw[key]).__name__}, defaulting to {option.default!r}"
            )
            value = deepcopy(option.default)
        else:
            value = deepcopy(raw[key])

        if option.rule is not None:
            value = option.rule(key, value, validated)
        validated[key] = value

    return validated


def sanitize_path(path: str, is_file: bool = False) -> str:
    """Use forward slashes; directories always end with a slash."""
    path = path.replace("\\", "/")
    if not is_file and not path.endswith("/"):
        path += "/"
    return path


# -- Rule factories -----------------------------------------------------------

def non_empty_string(is_path: bool = False, is_file: bool = False) -> Rule:
    def rule(key: str, value: str, options: Mapping[str, Any]) -> str:
        if len(value) == 0:
            raise ConfigurationError(
                key, "cannot be an empty string. Did you forget to specify this option?"
            )
        return sanitize_path(value, is_file) if is_path else value
    return rule


def int_range(minimum: Optional[int] = None, maximum: Optional[int] = None) -> Rule:
    def rule(key: str, value: int, options: Mapping[str, Any]) -> int:
        if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
            if maximum is None:
                raise ConfigurationError(key, f"must be an integer >= {minimum}, got {value}")
            raise ConfigurationError(
                key, f"must be an integer within the range of {minimum} - {maximum}, got {value}"
            )
        return value
    return rule


def one_of(choices: Iterable[str], case_sensitive: bool = True) -> Rule:
    choices = tuple(choices)

    def rule(key: str, value: str, options: Mapping[str, Any]) -> str:
        candidate = value if case_sensitive else value.lower()
        if candidate not in choices:
            raise ConfigurationError(
                key, f"{value!r} is not a valid value. Accepted values are: [{', '.join(choices)}]"
            )
        return candidate
    return rule


def string_list(item_rule: Optional[Rule] = None, allow_empty: bool = True) -> Rule:
    def rule(key: str, value, options: Mapping[str, Any]) -> list:
        if not allow_empty and len(value) == 0:
            raise ConfigurationError(
                key, "cannot be an empty list. Did you forget to specify this option?"
            )
        items = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(key, f"all entries must be strings, got {item!r}")
            items.append(item_rule(key, item, options) if item_rule else item)
        return items
    return rule
