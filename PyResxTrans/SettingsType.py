from __future__ import annotations
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

BasicType: TypeAlias = str | int | float | bool | list[str] | None
SettingType: TypeAlias = BasicType | dict[str, 'SettingType'] | dict[str, 'SettingsType']

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

true_values = ('true', 'yes', '1')
false_values = ('false', 'no', '0', '')

def _to_bool(value : Any) -> bool:
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        text = value.strip().lower()
        if text in true_values:
            return True
        if text in false_values:
            return False

    raise ValueError(value)

def _to_number(number_type : type) -> Callable[[Any], Any]:
    def convert(value : Any):
        # bool is an int subclass
        if isinstance(value, bool):
            raise ValueError(value)

        if isinstance(value, str):
            value = value.strip()

        if not isinstance(value, (int, float, str)):
            raise ValueError(value)

        return number_type(value)

    return convert

def _to_str(value : Any) -> str:
    if isinstance(value, (str, int, float, bool)):
        return str(value)

    raise ValueError(value)

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with typed getters.

    Getters return None for missing values (False for booleans) and raise
    SettingsError if a value cannot be converted.
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        super().__init__(settings or {})

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        return bool(self._get_as(key, default, _to_bool, "bool"))

    def get_int(self, key: str, default: int|None = None) -> int|None:
        return self._get_as(key, default, _to_number(int), "int")

    def get_float(self, key: str, default: float|None = None) -> float|None:
        return self._get_as(key, default, _to_number(float), "float")

    def get_str(self, key: str, default: str|None = None) -> str|None:
        return self._get_as(key, default, _to_str, "str")

    def get_dict(self, key: str) -> SettingsType:
        """Get a nested settings dictionary, stored back so that it can be modified in place"""
        value = self.get(key)
        if value is None:
            return SettingsType()

        if not isinstance(value, dict):
            raise SettingsError(f"Expected dict for key '{key}', got {type(value).__name__}")

        if not isinstance(value, SettingsType):
            value = SettingsType(value)
            self[key] = value

        return value

    def update(self, other : Any = (), /, **kwds) -> None:
        """Update settings, ignoring None values"""
        if hasattr(other, 'items'):
            other = { k: v for k, v in other.items() if v is not None }
        super().update(other, **{ k: v for k, v in kwds.items() if v is not None })

    def _get_as(self, key : str, default : Any, convert : Callable[[Any], Any], type_name : str) -> Any:
        value = self.get(key, default)
        if value is None:
            return None

        try:
            return convert(value)

        except (ValueError, TypeError) as e:
            raise SettingsError(f"Cannot convert setting '{key}' with value {value!r} to {type_name}") from e
