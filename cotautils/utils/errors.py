# -*- coding: utf-8 -*-


class CotaError(Exception):
    pass


class ConfigError(CotaError):
    pass


class RpcError(CotaError):

    def __init__(self, method, code, message, data=None):
        self.method = method
        self.code = code
        self.message = message
        self.data = data
        super(RpcError, self).__init__(f"RPC {method} Failed[{code}:{message}]")


class StageError(CotaError):
    """A runner stage failed; ``stage`` names it and ``cause`` is the original error."""

    def __init__(self, stage, cause):
        self.stage = stage
        self.cause = cause
        super(StageError, self).__init__(f"{stage} Failed[{type(cause).__name__}: {cause}]")
