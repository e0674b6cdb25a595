from .entity import Passenger as Passenger
from .enum import Gender as Gender
from .enum import PassengerType as PassengerType
from .factory import PassengerDetails as PassengerDetails
from .factory import PassengerFactory as PassengerFactory
from .repository import PassengerRepository as PassengerRepository
from .value_object import SeatNumber as SeatNumber
