from .flight_repository import FlightRepository as FlightRepository
from .user_repository import UserRepository as UserRepository
