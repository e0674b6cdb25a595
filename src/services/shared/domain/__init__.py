from .entity import AggregateRoot as AggregateRoot
from .entity import Entity as Entity
from .exception import (
    BookingCreationException as BookingCreationException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InsufficientSeatsException as InsufficientSeatsException,
)
from .exception import (
    PaymentGatewayException as PaymentGatewayException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    ValidationException as ValidationException,
)
from .repository import Repository as Repository
from .repository import UnitOfWork as UnitOfWork
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
