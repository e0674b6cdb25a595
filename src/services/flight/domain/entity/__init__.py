from .flight import Flight as Flight
from .user import User as User
