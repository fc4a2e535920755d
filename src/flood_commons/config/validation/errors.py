"""Config validation errors."""
from flood_commons.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or constructed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting has a value the library cannot use.

    ``setting`` is the field or environment variable name and ``reason``
    explains the rejection; both appear in :meth:`to_dict`.
    """
    default_code = "invalid_setting_value"

    def __init__(self, setting: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting}' has invalid value {value!r}: {reason}",
            detail={"setting": setting, "value": repr(value), "reason": reason},
        )

    @property
    def setting(self) -> str:
        return self.detail["setting"]

    @property
    def reason(self) -> str:
        return self.detail["reason"]


__all__ = ["ConfigError", "InvalidSettingValueError"]
