"""
Schema.org Event and Place.
"""

from typing import ClassVar

from pydantic import Field

from teseo.schemas.schemaorg.types import (
    GeoCoordinates,
    Offer,
    Organization,
    Person,
    PostalAddress,
    SchemaOrgEntity,
)


class Place(SchemaOrgEntity):
    """Schema.org Place, typically the location of an Event."""

    SCHEMA_TYPE: ClassVar[str] = "Place"

    name: str = ""
    address: PostalAddress | None = None
    geo: GeoCoordinates | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.address is not None:
            self.address.ensure_defaults()
        if self.geo is not None:
            self.geo.ensure_defaults()


class Event(SchemaOrgEntity):
    """
    Schema.org Event.

    Defaulting reaches every level: Event -> Place -> PostalAddress and
    GeoCoordinates.
    """

    SCHEMA_TYPE: ClassVar[str] = "Event"

    name: str = ""
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    location: Place | None = None
    organizer: Organization | None = None
    performer: Person | None = None
    image: list[str] = Field(default_factory=list)
    event_status: str = ""
    event_attendance_mode: str = ""
    offers: Offer | None = None

    def ensure_defaults(self) -> None:
        super().ensure_defaults()
        if self.location is not None:
            self.location.ensure_defaults()
        if self.organizer is not None:
            self.organizer.ensure_defaults()
        if self.performer is not None:
            self.performer.ensure_defaults()
        if self.offers is not None:
            self.offers.ensure_defaults()


def new_event(
    name: str,
    description: str = "",
    start_date: str = "",
    end_date: str = "",
    location: Place | None = None,
    organizer: Organization | None = None,
    performer: Person | None = None,
    images: list[str] | None = None,
    event_status: str = "",
    event_attendance_mode: str = "",
    offers: Offer | None = None,
) -> Event:
    """Create a defaulted Event."""
    event = Event(
        name=name,
        description=description,
        start_date=start_date,
        end_date=end_date,
        location=location,
        organizer=organizer,
        performer=performer,
        image=images or [],
        event_status=event_status,
        event_attendance_mode=event_attendance_mode,
        offers=offers,
    )
    event.ensure_defaults()
    return event
