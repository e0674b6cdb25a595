class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合（予約・決済の状態遷移違反など）"""

    pass


class DuplicateResourceException(DomainException):
    """リソースの重複エラー（パスポート番号・座席番号・フライト番号など）"""

    pass


class ValidationException(DomainException):
    """入力値の検証エラー

    最初に違反したフィールド名を保持する。
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InsufficientSeatsException(DomainException):
    """座席在庫が不足している場合"""

    def __init__(self, fare_class: str, required: int, available: int) -> None:
        super().__init__(
            f"Insufficient {fare_class} class seats available. "
            f"Required: {required}, Available: {available}"
        )
        self.fare_class = fare_class
        self.required = required
        self.available = available


class PaymentGatewayException(DomainException):
    """外部決済ゲートウェイの呼び出しに失敗した場合"""

    pass


class BookingCreationException(DomainException):
    """予約作成中の乗客登録失敗（補償処理後に送出される）"""

    def __init__(self, message: str, cause: Exception) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause
