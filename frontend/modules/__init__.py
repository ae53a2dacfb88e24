from .general import display_home_page
from .conversion import display_poco_conversion_page

__all__ = [
    "display_home_page",
    "display_poco_conversion_page",
]
