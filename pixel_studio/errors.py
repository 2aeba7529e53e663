"""Exception types raised by the Pixel Studio core."""


class PixelStudioError(Exception):
    """Base class for every error raised by pixel_studio."""


class OutOfBoundsError(PixelStudioError, IndexError):
    """A cell or layer index outside the valid range was passed to an explicit API call."""


class ConfigError(PixelStudioError, ValueError):
    """The settings file could not be parsed or holds invalid values."""


class ExportError(PixelStudioError):
    """Rendering or writing an exported image failed. Canvas state is untouched."""


class ReentrantMutationError(PixelStudioError, RuntimeError):
    """An edit was started while another edit on the same session was still running."""
