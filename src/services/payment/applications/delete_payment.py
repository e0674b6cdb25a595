from aws_lambda_powertools import Logger

from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class DeletePaymentService:
    """決済レコードの削除"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def delete(self, payment_id: int) -> None:
        with self._uow:
            payment = self._uow.payments.find_by_id(payment_id)
            if payment is None:
                raise ResourceNotFoundException(
                    f"Payment not found with ID: {payment_id}"
                )
            self._uow.payments.delete(payment)
            self._uow.commit()
        logger.info("Payment deleted", extra={"payment_id": payment_id})
