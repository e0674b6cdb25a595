from .gender import Gender as Gender
from .passenger_type import PassengerType as PassengerType
