import attrs


@attrs.frozen
class TicketEntity:
    """Ticket certificate bound to the event it was sold for; holdership lives in the registry."""

    id: int
    event_id: int
