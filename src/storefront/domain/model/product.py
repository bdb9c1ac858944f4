"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, variants are added, products are added to the catalogue.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

ALL_CATEGORIES = "all"


@dataclass
class ProductVariant:
    """A purchasable configuration of a product (e.g. colour / storage).

    ``price`` of ``None`` means the variant sells at the product price.
    """

    id: str
    name: str
    price: Money | None = None


@dataclass
class Product:
    """A product in the catalogue, owning its variants."""

    id: str
    name: str
    slug: str
    price: Money
    image: str = ""
    description: str = ""
    categories: list[str] = field(default_factory=list)
    variants: list[ProductVariant] = field(default_factory=list)

    def find_variant(self, variant_id: str) -> ProductVariant | None:
        for variant in self.variants:
            if variant.id == variant_id:
                return variant
        return None

    def unit_price(self, variant_id: str | None = None) -> Money:
        """Price of one unit, honouring a variant price override.

        Raises ValidationError if ``variant_id`` is not one of this
        product's variants.
        """
        if variant_id is None:
            return self.price
        variant = self.find_variant(variant_id)
        if variant is None:
            raise ValidationError(f"Variant not found: {variant_id}")
        if variant.price is not None:
            return variant.price
        return self.price

    def add_variant(self, variant: ProductVariant) -> None:
        if self.find_variant(variant.id) is not None:
            raise ValidationError(f"Variant '{variant.id}' already exists")
        self.variants.append(variant)

    # --- Browsing -------------------------------------------------------------

    def in_category(self, category: str) -> bool:
        wanted = category.lower()
        return any(c.lower() == wanted for c in self.categories)

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on the name or any category."""
        needle = search.lower()
        return needle in self.name.lower() or any(
            needle in c.lower() for c in self.categories
        )
