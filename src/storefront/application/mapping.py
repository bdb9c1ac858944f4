"""Domain -> DTO mapping shared by the order, account and catalogue use cases."""

from __future__ import annotations

from storefront.application.dto import (
    AddressDTO,
    OrderDTO,
    OrderItemDTO,
    ProductDTO,
    TimelineEntryDTO,
    TrackingDTO,
    TrackingEventDTO,
    UserDTO,
    VariantDTO,
)
from storefront.domain.model.order import Order
from storefront.domain.model.product import Product
from storefront.domain.model.user import Address, User
from storefront.domain.repository.user_repository import AddressRepository
from storefront.domain.service.order_timeline import TimelineEntry
from storefront.domain.service.shipping_provider import TrackingInfo


def address_to_dto(address: Address) -> AddressDTO:
    return AddressDTO(
        id=address.id,
        full_name=address.full_name,
        street=address.street,
        city=address.city,
        state=address.state,
        postal_code=address.postal_code,
        country=address.country,
    )


def order_to_dto(order: Order, address_repo: AddressRepository | None = None) -> OrderDTO:
    """Map an order, embedding its addresses when a repository is given."""
    shipping_address = billing_address = None
    if address_repo is not None:
        shipping = address_repo.get_by_id(order.shipping_address_id)
        billing = address_repo.get_by_id(order.billing_address_id)
        shipping_address = address_to_dto(shipping) if shipping else None
        billing_address = address_to_dto(billing) if billing else None

    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        order_number=order.order_number,
        user_id=order.user_id,
        status=order.status.value,
        payment_status=order.payment_status.value,
        payment_method=order.payment_method,
        shipping_method=order.shipping_method,
        notes=order.notes,
        items=[
            OrderItemDTO(
                product_id=item.product_id,
                product_name=item.product_name,
                variant_id=item.variant_id,
                variant_name=item.variant_name,
                quantity=item.quantity.value,
                price=item.price.plain,
                total=item.total.plain,
            )
            for item in order.items
        ],
        subtotal=order.subtotal.plain,
        shipping=order.shipping.plain,
        tax=order.tax.plain,
        total=order.total.plain,
        shipping_address_id=order.shipping_address_id,
        billing_address_id=order.billing_address_id,
        shipping_address=shipping_address,
        billing_address=billing_address,
        created_at=order.created_at.isoformat(),
        updated_at=order.updated_at.isoformat(),
    )


def timeline_to_dto(entries: list[TimelineEntry]) -> list[TimelineEntryDTO]:
    return [
        TimelineEntryDTO(
            status=entry.status,
            label=entry.label,
            date=entry.date.isoformat(),
            completed=entry.completed,
            current=entry.current,
            description=entry.description,
        )
        for entry in entries
    ]


def tracking_to_dto(info: TrackingInfo) -> TrackingDTO:
    return TrackingDTO(
        tracking_number=info.tracking_number,
        carrier=info.carrier,
        status=info.status,
        estimated_delivery=(
            info.estimated_delivery.isoformat() if info.estimated_delivery else None
        ),
        events=[
            TrackingEventDTO(
                date=event.date.isoformat(),
                location=event.location,
                description=event.description,
            )
            for event in info.events
        ],
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        created_at=user.created_at.isoformat(),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        slug=product.slug,
        price=product.price.plain,
        image=product.image,
        description=product.description,
        categories=list(product.categories),
        variants=[
            VariantDTO(
                id=variant.id,
                name=variant.name,
                price=variant.price.plain if variant.price is not None else None,
            )
            for variant in product.variants
        ],
    )
