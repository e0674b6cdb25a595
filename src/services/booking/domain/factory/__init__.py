from .booking_factory import BookingFactory as BookingFactory
