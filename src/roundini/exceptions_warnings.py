"""roundini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class AccessError(LookupError):
    """Raised when a key or section doesn't exist or a stored value can't be
    converted to the requested type."""


class ReadWriteError(OSError):
    """Raised when reading or writing an ini file or stream fails."""


class ExtractionError(Exception):
    """Raised when an entity could not be extracted."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when the ini contains content that is absorbed in a non-standard way."""


class DroppedTextWarning(IniStructureWarning):
    """Raised when dangling text is discarded while reading."""


class DuplicateKeyWarning(IniStructureWarning):
    """Raised when a key appears more than once in the same section."""


class DuplicateSectionWarning(IniStructureWarning):
    """Raised when a section header appears more than once."""
