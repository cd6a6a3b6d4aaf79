"""Concurrent services: error channel, non-blocking sender and error store."""

from richerr.services.channel import ErrorChannel
from richerr.services.error_store import EMPTY_STORE, ErrorStore
from richerr.services.send_nb import SendNb

__all__ = ["EMPTY_STORE", "ErrorChannel", "ErrorStore", "SendNb"]
