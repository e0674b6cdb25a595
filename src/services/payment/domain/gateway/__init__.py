from .payment_gateway import GatewayError as GatewayError
from .payment_gateway import PaymentGateway as PaymentGateway
