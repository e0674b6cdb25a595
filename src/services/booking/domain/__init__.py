from .entity import Booking as Booking
from .enum import BookingStatus as BookingStatus
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import BookingReference as BookingReference
