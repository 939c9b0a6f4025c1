from __future__ import annotations


class XLS20Error(RuntimeError):
    exit_code: int = 1


class NotConnectedError(XLS20Error):
    exit_code = 2


class NetworkConfigError(XLS20Error):
    exit_code = 3


class RequestValidationError(XLS20Error):
    exit_code = 4


class LedgerResponseError(XLS20Error):
    exit_code = 5
