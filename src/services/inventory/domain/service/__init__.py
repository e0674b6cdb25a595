from .pricing import price_for_class as price_for_class
from .pricing import total_price as total_price
from .seat_inventory import adjust_seats as adjust_seats
from .seat_inventory import available_seats_for_class as available_seats_for_class
from .seat_inventory import has_enough_seats as has_enough_seats
from .seat_inventory import require_availability as require_availability
