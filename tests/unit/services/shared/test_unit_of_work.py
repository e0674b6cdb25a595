import pytest

from services.shared.domain import UnitOfWork


class RecordingUnitOfWork(UnitOfWork):
    """呼び出しを記録するだけの UnitOfWork"""

    def __init__(self):
        super().__init__()
        self.calls: list[str] = []

    def _begin(self):
        self.calls.append("begin")

    def _end(self):
        self.calls.append("end")

    def commit(self):
        self.calls.append("commit")

    def rollback(self):
        self.calls.append("rollback")


class TestUnitOfWork:
    def test_nested_blocks_share_one_session(self):
        uow = RecordingUnitOfWork()

        with uow:
            with uow:
                uow.commit()
            assert uow.calls == ["begin", "commit"]

        assert uow.calls == ["begin", "commit", "rollback", "end"]

    def test_exception_rolls_back_and_propagates(self):
        uow = RecordingUnitOfWork()

        with pytest.raises(RuntimeError):
            with uow:
                raise RuntimeError("boom")

        assert uow.calls == ["begin", "rollback", "end"]
