from .fare_class import FareClass as FareClass
