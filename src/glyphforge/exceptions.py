"""Exception hierarchy for glyphforge."""


class GlyphforgeError(Exception):
    """Base exception for all glyphforge errors."""

    pass


class GeometryError(GlyphforgeError):
    """Errors in geometric calculations."""

    pass


class ContourError(GeometryError):
    """Error with contour data or operations."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class WindingError(ContourError):
    """Contours wind inconsistently or a hole lies outside its ring."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class IntersectionError(GeometryError):
    """Expected intersection between two paths was not found."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GeneratorError(GlyphforgeError):
    """Error in glyph generator setup."""

    pass


class DuplicateGlyphError(GeneratorError):
    """A character was registered twice."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Character {char!r} is already registered")


class FontError(GlyphforgeError):
    """Errors related to font lookup or export."""

    pass


class FontNotFoundError(FontError):
    """Requested font preset does not exist."""

    def __init__(self, font_id: str) -> None:
        self.font_id = font_id
        super().__init__(f"Unknown font id '{font_id}'")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")
