import os
from functools import lru_cache

from aws_lambda_powertools.utilities import parameters
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from services.shared.infrastructure.orm import Base

# Secrets Manager の値を再取得するまでの秒数
SECRET_MAX_AGE_SECONDS = 300


def get_database_url() -> str:
    """接続先URLを取得する

    DATABASE_URL が未設定の場合は DATABASE_SECRET_ARN の
    Secrets Manager シークレットから取得する（Powertools のキャッシュを利用）。
    """
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return parameters.get_secret(
        os.environ["DATABASE_SECRET_ARN"], max_age=SECRET_MAX_AGE_SECONDS
    )


def create_database_engine(url: str, echo: bool = False) -> Engine:
    """エンジンを生成する

    SQLite のインメモリDBは StaticPool で単一コネクションを共有する。
    """
    if url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url.rstrip("/") == "sqlite:":
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, future=True, **kwargs)
    return create_engine(url, echo=echo, future=True, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine, autoflush=False, expire_on_commit=False, future=True
    )


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """環境変数から構成したセッションファクトリ（プロセス内で共有）"""
    echo = os.getenv("DATABASE_ECHO", "false").lower() == "true"
    engine = create_database_engine(get_database_url(), echo=echo)
    return create_session_factory(engine)


def create_schema(engine: Engine) -> None:
    """全テーブルを作成する（存在するものはスキップ）"""
    Base.metadata.create_all(engine)
