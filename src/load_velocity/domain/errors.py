from __future__ import annotations

from .reasons import ReasonCode


class LoadError(ValueError):
    """Recoverable per-record failure collected by the validator.

    Errors never abort a run; they are returned next to the decisions so the
    calling layer can report them.
    """

    def __init__(self, reason: ReasonCode, detail: str = "", *, line_no: int | None = None) -> None:
        super().__init__(detail or reason.value)
        self.reason = reason
        self.detail = detail
        self.line_no = line_no

    def at_line(self, line_no: int) -> None:
        # Parsers raise without position; the caller stamps it afterwards.
        self.line_no = line_no


class DecodeError(LoadError):
    pass


class AmountFormatError(DecodeError):
    def __init__(self, detail: str = "", *, line_no: int | None = None) -> None:
        super().__init__(ReasonCode.INVALID_AMOUNT_FORMAT, detail, line_no=line_no)


class EncodeError(LoadError):
    def __init__(self, detail: str = "", *, line_no: int | None = None) -> None:
        super().__init__(ReasonCode.OUTPUT_ENCODE_ERROR, detail, line_no=line_no)
