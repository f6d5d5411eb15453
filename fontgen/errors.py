"""Error types raised by the atlas generator.

Configuration errors are raised before any rasterization work starts.
Rasterization errors carry the failing stage and code point.
I/O errors carry the offending path.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path


class FontGenError(Exception):
    """Base class for all fontgen errors."""


# ============== Configuration ==============

class ConfigurationError(FontGenError):
    """Invalid user input detected before the pipeline runs."""


class InputFileDoesNotExist(ConfigurationError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"The font file {self.path} could not be found.")


class InputFileIsNotAFile(ConfigurationError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"The path {self.path} is not a file.")


class OutputFileExists(ConfigurationError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"A file already exists in the location {self.path}")


class SlotGlyphSizeCannotBeZero(ConfigurationError):
    def __init__(self, slot_glyph_size: int = 0):
        self.slot_glyph_size = slot_glyph_size
        super().__init__("The slot glyph size cannot be zero.")


class PaddingLargerThanSlotGlyphSize(ConfigurationError):
    def __init__(self, padding: int, slot_glyph_size: int):
        self.padding = padding
        self.slot_glyph_size = slot_glyph_size
        super().__init__(
            f"The padding ({padding} pixels) for each glyph is "
            f"larger than the glyph slot size ({slot_glyph_size} pixels)."
        )


class InvalidOrigin(ConfigurationError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Selection for image origin invalid. Got {token}")


# ============== Rasterization ==============

class RasterStage(Enum):
    """Rasterizer call that failed."""

    SET_PIXEL_SIZE = "set_pixel_size"
    LOAD_CHARACTER = "load_character"
    RENDER_CHARACTER = "render_character"
    GET_GLYPH_IMAGE = "get_glyph_image"


_STAGE_MESSAGES = {
    RasterStage.SET_PIXEL_SIZE: "failed to set the glyph size to {pixels} pixels",
    RasterStage.LOAD_CHARACTER: "failed to load the character with code point {code_point}",
    RasterStage.RENDER_CHARACTER: "could not render the code point {code_point}",
    RasterStage.GET_GLYPH_IMAGE: "could not extract the glyph image for the code point {code_point}",
}


class RasterizationError(FontGenError):
    """A rasterizer call failed. Always fatal for the whole run."""

    def __init__(self, stage: RasterStage, code_point: int, pixels: int | None = None):
        self.stage = stage
        self.code_point = code_point
        self.pixels = pixels
        detail = _STAGE_MESSAGES[stage].format(code_point=code_point, pixels=pixels)
        super().__init__(f"The rasterizer {detail}.")


# ============== I/O ==============

class FontFileError(FontGenError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Could not open font file: {self.path}.")


class AtlasWriteError(FontGenError):
    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Could not create atlas file: {self.path}.")


class AtlasReadError(FontGenError):
    def __init__(self, path: str | Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        message = f"Could not read atlas file: {self.path}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
