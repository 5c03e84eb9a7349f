"""Merchant reference data and uniform selection within a category."""

from __future__ import annotations

from numpy.random import Generator

from payment_dashboard.models.enums import Category

# Merchants registered for each spending category
MERCHANTS_BY_CATEGORY: dict[Category, tuple[str, ...]] = {
    Category.FOOD_AND_DINING: ("Swiggy", "Zomato", "McDonald's", "Domino's", "Cafe Coffee Day"),
    Category.SHOPPING: ("Amazon", "Flipkart", "Myntra", "Meesho", "Nykaa"),
    Category.TRANSPORT: ("Ola", "Uber", "Rapido", "Metro Card", "IRCTC"),
    Category.UTILITIES: ("BESCOM", "Airtel", "Jio", "BWSSB", "Gas Agency"),
    Category.ENTERTAINMENT: ("Netflix", "Hotstar", "BookMyShow", "Spotify", "YouTube Premium"),
    Category.HEALTHCARE: ("PharmEasy", "1mg", "Apollo", "Medlife", "Lab Tests"),
    Category.EDUCATION: ("Coursera", "Udemy", "BYJU'S", "Unacademy", "WhiteHat Jr"),
    Category.TRAVEL: ("MakeMyTrip", "Goibibo", "OYO", "Airbnb", "Cleartrip"),
}


def merchants_for(category: Category | str) -> tuple[str, ...]:
    """Return the merchants registered for a category.

    Args:
        category: Category enum member or its display value.

    Returns:
        Tuple of merchant names.

    Raises:
        ValueError: If the category is not a known Category value.
    """
    return MERCHANTS_BY_CATEGORY[Category(category)]


def is_registered_merchant(category: Category | str, merchant: str) -> bool:
    """Return True if the merchant belongs to the category's list."""
    try:
        return merchant in merchants_for(category)
    except ValueError:
        return False


def select_merchant(rng: Generator, category: Category) -> str:
    """Pick a merchant uniformly at random within a category.

    Args:
        rng: NumPy random generator instance.
        category: Category the merchant must belong to.

    Returns:
        Merchant name from the category's list.
    """
    merchants = MERCHANTS_BY_CATEGORY[category]
    idx = rng.integers(0, len(merchants))
    return merchants[int(idx)]
