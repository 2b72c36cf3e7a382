from __future__ import annotations

from dataclasses import dataclass

from app.core.config import settings
from app.models.booking import Booking


@dataclass(frozen=True)
class Pricing:
    venue_cost: int
    additional_services: int
    total_amount: int


@dataclass(frozen=True)
class RenderedDocument:
    filename: str
    content: str


def pricing_for(booking: Booking) -> Pricing:
    venue = (
        booking.venue_cost if booking.venue_cost is not None else settings.quote_venue_cost
    )
    extras = (
        booking.additional_services
        if booking.additional_services is not None
        else settings.quote_additional_services
    )
    total = booking.total_amount if booking.total_amount is not None else venue + extras
    return Pricing(venue_cost=venue, additional_services=extras, total_amount=total)


def invoice_number(booking: Booking) -> str:
    return f"INV-{booking.id[:8]}"


def _body(booking: Booking, pricing: Pricing) -> list[str]:
    return [
        f"Customer: {booking.name}",
        f"Event Type: {booking.event_type}",
        f"Event Dates: {', '.join(booking.preferred_dates or [])}",
        "",
        f"Venue Rental: ${pricing.venue_cost}",
        f"Additional Services: ${pricing.additional_services}",
        f"Total Amount: ${pricing.total_amount}",
    ]


def render_quotation(booking: Booking) -> RenderedDocument:
    lines = [settings.venue_name, "QUOTATION", ""]
    lines += _body(booking, pricing_for(booking))
    lines += ["", "Valid for 30 days from date of issue."]
    return RenderedDocument(
        filename=f"quotation-{booking.id}.txt", content="\n".join(lines) + "\n"
    )


def render_invoice(booking: Booking) -> RenderedDocument:
    number = invoice_number(booking)
    lines = [settings.venue_name, "INVOICE", "", f"Invoice #: {number}"]
    lines += _body(booking, pricing_for(booking))
    lines += ["", "Payment due within 30 days."]
    return RenderedDocument(
        filename=f"invoice-{number}.txt", content="\n".join(lines) + "\n"
    )
