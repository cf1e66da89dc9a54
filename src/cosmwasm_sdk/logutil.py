import logging
import re
from typing import Iterable


# wasm_byte_code and similar payloads: long unbroken base64 or hex runs
_BLOB = re.compile(r"[A-Za-z0-9+/=]{64,}")


class ElidingFilter(logging.Filter):
    """Shorten long base64/hex blobs in log records to `keep` characters."""

    def __init__(self, keep: int = 256) -> None:
        super().__init__()
        self.keep = keep

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = str(record.getMessage())
        except (TypeError, ValueError):
            # args do not fit the format; the handler reports it via handleError
            return True
        if len(msg) <= self.keep:
            return True

        def _elide(m: re.Match) -> str:
            s = m.group(0)
            if len(s) <= self.keep:
                return s
            return f"{s[: self.keep]}...<{len(s) - self.keep} more chars>"

        record.msg = _BLOB.sub(_elide, msg)
        record.args = None
        return True


def setup_logging(
    level: int = logging.INFO,
    loggers: Iterable[str] = ("cosmwasm_sdk", "cosmwasm_cli"),
    keep: int = 256,
) -> None:
    logging.basicConfig(level=level)
    # logger filters do not reach child loggers, handler filters do
    f = ElidingFilter(keep)
    for h in logging.getLogger().handlers:
        if not any(isinstance(x, ElidingFilter) for x in h.filters):
            h.addFilter(f)
    for name in loggers:
        logging.getLogger(name).setLevel(level)
