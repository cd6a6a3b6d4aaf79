"""Key/value annotation node."""

from __future__ import annotations

from richerr.errorglue.formats import CSFormat
from richerr.errorglue.rich_error import ErrorChain


class ErrorData(ErrorChain):
    """
    Attaches one string pair to an inner error.

    An empty key makes value a list item; otherwise it is a keyed value
    where the outermost occurrence of a key wins.
    """

    def __init__(self, err: BaseException | None, key: str, value: str) -> None:
        super().__init__(err)
        self._key = key
        self._value = value
        self.args = (err, key, value)

    def key_value(self) -> tuple[str, str]:
        return self._key, self._value

    def data_line(self) -> str:
        """``"key: value"``, or just value for a list item."""
        if self._key:
            return f"{self._key}: {self._value}"
        return self._value

    def chain_string(self, format: CSFormat) -> str:
        if format is CSFormat.LONG:
            return str(self) + "\n" + self.data_line()
        if format is CSFormat.LONG_SUFFIX:
            return self.data_line()
        return super().chain_string(format)

    def __repr__(self) -> str:
        return f"ErrorData({self._err!r}, {self._key!r}, {self._value!r})"
