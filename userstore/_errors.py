__all__ = (
    "ConfigError",
    "StoreError",
    "UnknownActionError"
)


class StoreError(Exception):
    pass


class UnknownActionError(StoreError):
    def __init__(self, action: object) -> None:
        self.action = action

        super().__init__(f"Unknown action: {action!r}")


class ConfigError(StoreError):
    pass
