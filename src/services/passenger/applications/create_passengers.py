from datetime import date
from typing import Callable

from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class CreatePassengersService:
    """乗客登録ユースケース

    予約作成・予約変更からは add_passengers / replace_passengers を
    呼び出し側の UnitOfWork 内で使用する（コミットは呼び出し側）。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        factory: PassengerFactory | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._uow = uow
        self._factory = factory or PassengerFactory()
        self._today = today

    def create_passenger(self, details: PassengerDetails, booking_id: int) -> Passenger:
        """乗客を1名登録する"""
        logger.info("Creating passenger", extra={"booking_id": booking_id})
        with self._uow:
            self._pending_booking(booking_id)
            passenger = self._factory.create(details, booking_id, self._today())
            self.check_duplicate_passport_in_booking(
                passenger.passport_number, booking_id
            )
            self._uow.passengers.save(passenger)
            self._uow.commit()
        logger.info("Passenger created", extra={"passenger_id": passenger.id})
        return passenger

    def create_passengers(
        self, batch: list[PassengerDetails], booking_id: int
    ) -> list[Passenger]:
        """乗客をまとめて登録する"""
        with self._uow:
            passengers = self.add_passengers(batch, booking_id)
            self._uow.commit()
        return passengers

    def add_passengers(
        self, batch: list[PassengerDetails], booking_id: int
    ) -> list[Passenger]:
        """乗客をまとめて登録する（コミットしない）

        全件の検証とバッチ内のパスポート番号重複の検査は書き込み前に行う。
        """
        logger.info(
            "Creating passengers",
            extra={"booking_id": booking_id, "count": len(batch)},
        )
        with self._uow:
            self._pending_booking(booking_id)

            today = self._today()
            passengers = [
                self._factory.create(details, booking_id, today) for details in batch
            ]
            self._reject_duplicates_in_batch(passengers)
            for passenger in passengers:
                self.check_duplicate_passport_in_booking(
                    passenger.passport_number, booking_id
                )
                self._uow.passengers.save(passenger)
        return passengers

    def replace_passengers(
        self, batch: list[PassengerDetails], booking_id: int
    ) -> list[Passenger]:
        """予約の乗客を入れ替える（コミットしない）"""
        with self._uow:
            self._pending_booking(booking_id)
            for passenger in self._uow.passengers.find_by_booking_id(booking_id):
                self._uow.passengers.delete(passenger)
            return self.add_passengers(batch, booking_id)

    def check_duplicate_passport_in_booking(
        self,
        passport_number: str,
        booking_id: int,
        exclude_passenger_id: int | None = None,
    ) -> None:
        """同一予約内のパスポート番号重複を検査する（大文字小文字を区別しない）"""
        with self._uow:
            for passenger in self._uow.passengers.find_by_booking_id(booking_id):
                if passenger.id == exclude_passenger_id:
                    continue
                if passenger.has_passport(passport_number):
                    raise DuplicateResourceException(
                        f"Passenger with passport number {passport_number} "
                        "already exists in this booking"
                    )

    @staticmethod
    def _reject_duplicates_in_batch(passengers: list[Passenger]) -> None:
        passports = [p.passport_number.strip().upper() for p in passengers]
        if len(set(passports)) != len(passports):
            raise DuplicateResourceException(
                "Duplicate passport numbers found in passenger list"
            )

    def _pending_booking(self, booking_id: int) -> Booking:
        booking = self._uow.bookings.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found with ID: {booking_id}")
        booking.ensure_pending("modify passengers")
        return booking
