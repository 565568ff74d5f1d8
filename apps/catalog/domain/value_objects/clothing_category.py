"""
Clothing category value object.
"""
from enum import Enum


class ClothingCategory(str, Enum):
    """Who the garment is for; prices differ per category."""
    MEN = 'men'
    WOMEN = 'women'
    CHILDREN = 'children'

    @classmethod
    def choices(cls):
        return [(category.value, category.name.title()) for category in cls]
