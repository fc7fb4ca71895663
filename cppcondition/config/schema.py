"""Settings for condition parsing, validated with Pydantic.

Settings can be given by field name (``handle_linux_macros``) or by the
dotted configuration keys used in extractor configuration files
(``code.extractor.handle_linux_macros``).
"""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator


class InvalidConditionHandling(str, Enum):
    """What the Boolean interpreter does with a condition it cannot parse.

    - EXCEPTION: Raise the error. The caller decides what to do with it.
    - TRUE: Replace the invalid condition with true.
    - ERROR_VARIABLE: Replace the invalid condition with a variable called
      ``PARSING_ERROR``.
    """

    EXCEPTION = "EXCEPTION"
    TRUE = "TRUE"
    ERROR_VARIABLE = "ERROR_VARIABLE"


SETTING_KEYS = {
    "code.extractor.handle_linux_macros": "handle_linux_macros",
    "code.extractor.fuzzy_parsing": "fuzzy_parsing",
    "code.extractor.invalid_condition": "invalid_condition",
}


class CppParsingSettings(BaseModel):
    """Configuration shared by the condition interpreters.

    Attributes:
        handle_linux_macros: Whether to translate the Linux macros
            IS_ENABLED, IS_BUILTIN and IS_MODULE.
        fuzzy_parsing: Whether to encode comparisons and bare variables as
            synthesized Boolean variables (Boolean interpreter only).
        invalid_condition: How the Boolean interpreter handles conditions
            that cannot be parsed.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    handle_linux_macros: bool = False
    fuzzy_parsing: bool = False
    invalid_condition: InvalidConditionHandling = InvalidConditionHandling.EXCEPTION

    @field_validator("invalid_condition", mode="before")
    @classmethod
    def normalize_invalid_condition(cls, v: Any) -> Any:
        """Accept enum names case-insensitively (``error_variable``)."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CppParsingSettings":
        """Build settings from a mapping with field names or dotted keys.

        Args:
            data: Configuration mapping; dotted ``code.extractor.*`` keys are
                translated to field names.

        Returns:
            Validated settings.
        """
        normalized = {SETTING_KEYS.get(key, key): value for key, value in data.items()}
        return cls.model_validate(normalized)
