from .booking_reference import BookingReference as BookingReference
