from .passenger_details import PassengerDetails as PassengerDetails
from .passenger_factory import PassengerFactory as PassengerFactory
