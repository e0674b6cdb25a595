from .seat_number import SeatNumber as SeatNumber
