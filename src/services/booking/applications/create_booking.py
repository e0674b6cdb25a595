from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightStatus
from services.inventory.domain import (
    FareClass,
    adjust_seats,
    require_availability,
    total_price,
)
from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.domain.factory import PassengerDetails
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    BookingCreationException,
    BusinessRuleViolationException,
    DomainException,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class CreateBookingService:
    """予約作成ユースケース

    1. 利用者・フライトの存在確認（フライトは行ロック）
    2. 運賃クラスの空席確認・合計金額の計算
    3. PENDING 予約の保存
    4. 乗客の登録（失敗時は予約を削除してロールバック）
    5. 座席の消費・コミット
    """

    def __init__(
        self,
        uow: UnitOfWork,
        passenger_service: CreatePassengersService,
        factory: BookingFactory | None = None,
    ) -> None:
        self._uow = uow
        self._passenger_service = passenger_service
        self._factory = factory or BookingFactory()

    def create(
        self,
        flight_id: int,
        fare_class: FareClass | str | None,
        passengers: list[PassengerDetails],
        user_id: int,
    ) -> Booking:
        logger.info(
            "Creating booking", extra={"user_id": user_id, "flight_id": flight_id}
        )
        seat_class = (
            fare_class if isinstance(fare_class, FareClass) else FareClass.parse(fare_class)
        )
        count = len(passengers)
        if count == 0:
            raise ValidationException("passengers", "At least one passenger is required")

        with self._uow:
            if self._uow.users.find_by_id(user_id) is None:
                raise ResourceNotFoundException(f"User not found with ID: {user_id}")
            flight = self._uow.flights.find_by_id(flight_id, for_update=True)
            if flight is None:
                raise ResourceNotFoundException(f"Flight not found with ID: {flight_id}")
            self._ensure_bookable(flight)

            require_availability(flight, seat_class, count)

            reference = self._factory.generate_reference(
                self._uow.bookings.exists_by_reference
            )
            booking = self._factory.create(
                reference=reference,
                user_id=user_id,
                flight_id=flight_id,
                fare_class=seat_class,
                passenger_count=count,
                total_amount=total_price(flight, seat_class, count),
            )
            self._uow.bookings.save(booking)

            try:
                self._passenger_service.add_passengers(passengers, booking.id)
            except Exception as e:
                logger.warning(
                    "Passenger creation failed, removing booking",
                    extra={"booking_reference": booking.reference.value},
                )
                self._uow.bookings.delete(booking)
                self._uow.rollback()
                if isinstance(e, DomainException):
                    raise BookingCreationException(
                        f"Failed to create passengers for booking {booking.reference}",
                        e,
                    ) from e
                raise

            adjust_seats(flight, seat_class, count, restoring=False)
            self._uow.flights.save(flight)
            self._uow.commit()

        logger.info(
            "Booking created",
            extra={"booking_reference": booking.reference.value, "passengers": count},
        )
        return booking

    @staticmethod
    def _ensure_bookable(flight: Flight) -> None:
        if not flight.active or flight.status == FlightStatus.CANCELLED:
            raise BusinessRuleViolationException(
                f"Flight {flight.flight_number} is not available for booking"
            )
