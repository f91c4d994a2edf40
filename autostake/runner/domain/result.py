"""TxResult value object — the outcome of one transaction sent by a runner."""

from pydantic import BaseModel


class TxResult(BaseModel, frozen=True):
    """One unit of work reported by a NetworkRunner, e.g. a restake transaction."""

    message: str
    error: str | None = None
