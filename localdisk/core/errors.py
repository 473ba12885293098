"""Exception types raised by localdisk."""


class LocalDiskError(Exception):
    """Base class for localdisk errors."""


class InvalidDevicePathError(LocalDiskError, ValueError):
    """Raised when a device path cannot be split into a device name."""

    def __init__(self, device_path: str):
        super().__init__(f"Invalid pathname of {device_path!r} received")
        self.device_path = device_path


class DeviceNotFoundError(LocalDiskError):
    """Raised when a device path does not exist."""

    def __init__(self, device_path: str):
        super().__init__(f"Device path not found: {device_path}")
        self.device_path = device_path


class LedControlError(LocalDiskError):
    """Raised when the storage library refuses an LED change."""

    def __init__(self, device_path: str, state: str, reason: str = ""):
        message = f"Unable to turn fault LED {state} for {device_path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.device_path = device_path
        self.state = state


class NativeSourceUnavailableError(LocalDiskError):
    """Raised when the libstoragemgmt Python binding cannot be loaded."""


class ConfigValidationError(LocalDiskError):
    """Raised when a configuration file is malformed."""
