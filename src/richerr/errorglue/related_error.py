"""Sibling-error node."""

from __future__ import annotations

from richerr.errorglue.rich_error import ErrorChain


class RelatedError(ErrorChain):
    """
    Associates a second error with an error without making it part of the
    primary chain, e.g. a cleanup failure following the original failure.
    """

    def __init__(self, err: BaseException | None, associated: BaseException | None) -> None:
        super().__init__(err)
        self._associated = associated
        self.args = (err, associated)

    def associated_error(self) -> BaseException | None:
        return self._associated

    def __repr__(self) -> str:
        return f"RelatedError({self._err!r}, {self._associated!r})"
