"""Application layer DTOs"""

from src.service.ticketing.app.dto.event_details import EventDetails

__all__ = ['EventDetails']
