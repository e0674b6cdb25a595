from .enum import FareClass as FareClass
from .service import adjust_seats as adjust_seats
from .service import available_seats_for_class as available_seats_for_class
from .service import has_enough_seats as has_enough_seats
from .service import price_for_class as price_for_class
from .service import require_availability as require_availability
from .service import total_price as total_price
