"""Language entity - a translatable language from the catalog."""

from dataclasses import dataclass, field
from typing import Any, Mapping

# Reserved source code meaning "let the provider detect the language"
AUTO_DETECT_CODE = "auto"
DEFAULT_TARGET_CODE = "en"


@dataclass(frozen=True)
class Language:
    """A language the translator can offer in its dropdowns.

    Attributes:
        code: Short identifier understood by the provider (e.g. "en", "auto").
        name: Human readable display name.

    Two languages are equal when their codes match; the name is display only.
    """

    code: str
    name: str = field(compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Language":
        """Build a Language from a ``{"code": ..., "name": ...}`` object.

        Raises:
            ValueError: If either field is missing or is not a string.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Language entry must be an object, got {type(data).__name__}")

        code = data.get("code")
        name = data.get("name")
        if not isinstance(code, str) or not isinstance(name, str):
            raise ValueError(f"Language entry needs string 'code' and 'name': {data!r}")

        return cls(code=code, name=name)
