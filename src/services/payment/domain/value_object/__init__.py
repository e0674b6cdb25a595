from .transaction_id import TransactionId as TransactionId
