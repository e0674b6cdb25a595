from .passenger_validator import age_on as age_on
from .passenger_validator import validate_passenger as validate_passenger
