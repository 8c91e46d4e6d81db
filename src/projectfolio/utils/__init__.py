from .frontmatter import FRONT_MATTER_DELIMITER, FrontMatterValue, extract
from .slug import slug_from_filename

__all__ = [
    "FRONT_MATTER_DELIMITER",
    "FrontMatterValue",
    "extract",
    "slug_from_filename",
]
