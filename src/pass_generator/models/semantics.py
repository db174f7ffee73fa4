"""Semantic tags: machine-readable metadata about the pass content.

Only a representative subset of the tags Apple defines is modelled.
Any other tag may be passed as an extra keyword (using its pass.json
name) and is emitted unchanged.

See: https://developer.apple.com/documentation/walletpasses/semantictags
"""

from pydantic import ConfigDict, Field

from pass_generator.models.base import PassDate, PassModel
from pass_generator.models.enums import PassEventType


class PassCurrencyAmount(PassModel):
    currency_code: str = Field(..., min_length=3, max_length=3)
    amount: str


class PassSeat(PassModel):
    seat_section: str | None = None
    seat_row: str | None = None
    seat_number: str | None = None
    seat_identifier: str | None = None
    seat_type: str | None = None
    seat_description: str | None = None


class PassPersonNameComponents(PassModel):
    given_name: str | None = None
    middle_name: str | None = None
    family_name: str | None = None
    name_prefix: str | None = None
    name_suffix: str | None = None
    nickname: str | None = None
    phonetic_representation: "PassPersonNameComponents | None" = None


class SemanticLocation(PassModel):
    latitude: float
    longitude: float


class PassSemantics(PassModel):
    model_config = ConfigDict(extra="allow")

    # All passes
    total_price: PassCurrencyAmount | None = None

    # Boarding passes and events
    duration: float | None = None  # seconds
    seats: list[PassSeat] | None = None
    silence_requested: bool | None = None

    # Boarding passes
    departure_location: SemanticLocation | None = None
    departure_location_description: str | None = None
    destination_location: SemanticLocation | None = None
    destination_location_description: str | None = None
    transit_provider: str | None = None
    vehicle_number: str | None = None
    original_departure_date: PassDate | None = None
    current_departure_date: PassDate | None = None
    original_arrival_date: PassDate | None = None
    current_arrival_date: PassDate | None = None
    boarding_group: str | None = None
    confirmation_number: str | None = None
    passenger_name: PassPersonNameComponents | None = None

    # Airline boarding passes
    airline_code: str | None = None
    flight_number: str | None = None
    departure_airport_code: str | None = None
    departure_gate: str | None = None
    destination_airport_code: str | None = None

    # Event tickets
    event_name: str | None = None
    venue_name: str | None = None
    venue_location: SemanticLocation | None = None
    event_type: PassEventType | None = None
    event_start_date: PassDate | None = None
    event_end_date: PassDate | None = None
    artist_ids: list[str] | None = Field(None, alias="artistIDs")
    performer_names: list[str] | None = None

    # Store cards
    balance: PassCurrencyAmount | None = None
