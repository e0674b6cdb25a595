from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class ConfirmBookingService:
    """予約確定ユースケース（確定済みなら何もしない）"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def confirm(self, reference: str) -> Booking:
        with self._uow:
            booking = self._uow.bookings.find_by_reference(reference)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {reference}")
            if not booking.confirm():
                logger.info(
                    "Booking is already confirmed",
                    extra={"booking_reference": reference},
                )
                return booking
            self._uow.bookings.save(booking)
            self._uow.commit()
        logger.info("Booking confirmed", extra={"booking_reference": reference})
        return booking
