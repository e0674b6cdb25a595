from .entity import Payment as Payment
from .enum import PaymentMethod as PaymentMethod
from .enum import PaymentStatus as PaymentStatus
from .factory import PaymentFactory as PaymentFactory
from .gateway import GatewayError as GatewayError
from .gateway import PaymentGateway as PaymentGateway
from .repository import PaymentRepository as PaymentRepository
from .value_object import TransactionId as TransactionId
