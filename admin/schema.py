from pydantic import BaseModel


class StatisticsResponse(BaseModel):
    total_contacts: int = 0
    new_contacts: int = 0
    total_subscribers: int = 0
    total_bookings: int = 0
    confirmed_bookings: int = 0
    total_revenue: float = 0
