"""Native plugins used by the function calling samples."""

import math
import uuid
from typing import Annotated, Literal

from chat_samples.functions.plugin import kernel_function

WidgetType = Literal["Useful", "Decorative"]
WidgetColor = Literal["Red", "Green", "Blue"]


class MenuPlugin:
    """A restaurant menu with fixed specials."""

    SPECIALS = {
        "Special Soup": "Clam Chowder",
        "Special Salad": "Cobb Salad",
        "Special Drink": "Chai Tea",
    }

    @kernel_function(description="Provides a list of specials from the menu.")
    def get_specials(self) -> str:
        return "\n".join(f"{course}: {item}" for course, item in self.SPECIALS.items())

    @kernel_function(description="Provides the price of the requested menu item.")
    def get_item_price(
        self,
        menu_item: Annotated[str, "The name of the menu item."],
    ) -> str:
        return "$9.99"


class WidgetFactory:
    """Creates widgets with a fresh serial number."""

    @kernel_function(description="Creates a new widget of the specified type and colors")
    def create_widget(
        self,
        widget_type: Annotated[WidgetType, "The type of widget to be created."],
        colors: Annotated[list[WidgetColor], "The colors of the widget to be created."],
    ) -> dict[str, object]:
        return {
            "serial_number": f"SN-{uuid.uuid4().hex[:8].upper()}",
            "type": widget_type,
            "colors": colors,
        }


class MathPlugin:
    """Mathematical operations the model can delegate."""

    @kernel_function(description="Calculate the square root of a number")
    def square_root(
        self,
        number: Annotated[float, "The number to calculate square root for"],
    ) -> float:
        return math.sqrt(number)

    @kernel_function(description="Calculate factorial of a number")
    def factorial(
        self,
        number: Annotated[int, "The number to calculate factorial for (must be non-negative)"],
    ) -> int:
        if number < 0:
            raise ValueError("Number must be non-negative")
        return math.factorial(number)

    @kernel_function(description="Check if a number is prime")
    def is_prime(
        self,
        number: Annotated[int, "The number to check for primality"],
    ) -> bool:
        if number < 2:
            return False
        if number % 2 == 0:
            return number == 2
        return all(number % i for i in range(3, math.isqrt(number) + 1, 2))
