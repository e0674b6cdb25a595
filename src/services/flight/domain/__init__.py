from .entity import Flight as Flight
from .entity import User as User
from .enum import FlightStatus as FlightStatus
from .factory import FlightDetails as FlightDetails
from .factory import FlightFactory as FlightFactory
from .repository import FlightRepository as FlightRepository
from .repository import UserRepository as UserRepository
from .value_object import FlightNumber as FlightNumber
