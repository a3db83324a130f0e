"""Rectangle value object."""

from pydantic import BaseModel, Field


class Rectangle(BaseModel):
    """Axis-aligned rectangle.

    Attributes:
        width: Horizontal size
        height: Vertical size

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.area()
        200

    """

    width: int | float = Field(description='Horizontal size')
    height: int | float = Field(description='Vertical size')

    def __init__(self, width: int | float, height: int | float, **data):
        super().__init__(width=width, height=height, **data)

    def area(self) -> int | float:
        """Return width * height."""
        return self.width * self.height
