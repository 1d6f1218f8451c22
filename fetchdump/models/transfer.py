from __future__ import annotations

from pydantic import BaseModel, Field


class TransferOptions(BaseModel):
    """Options for a single GET transfer.

    ``connect_timeout`` bounds connection establishment only; the
    data-transfer phase has no time limit.
    """

    url: str
    connect_timeout: float = Field(default=5.0, gt=0)
    return_transfer: bool = True
    verify_ssl: bool = True
