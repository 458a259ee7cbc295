"""Classification of provider parameter-compatibility rejections.

Providers keep changing which parameters a model accepts. When a call is
rejected because of a parameter we can adjust (the token-limit name or
``temperature``), the pipeline makes one extra call with the adjusted
parameters.

Detection prefers the structured ``param`` field of the provider error
body (``{"error": {"param": "max_tokens", ...}}``). Without it we fall back
to matching the parameter name in the error message, which is heuristic:
a message that merely mentions ``temperature`` for some other reason will
also match.
"""
from __future__ import annotations

from enum import StrEnum

from ai_content_writer.types.enums import TokenParameter
from ai_content_writer.types.params import ResolvedParameters

_TOKEN_NAMES = tuple(p.value for p in TokenParameter)


class Rejection(StrEnum):
    """Why a provider rejected a request."""

    TOKEN_PARAM_REJECTED = "token_param_rejected"
    TEMPERATURE_REJECTED = "temperature_rejected"
    OTHER = "other"


def classify_rejection(error: BaseException, params: ResolvedParameters) -> Rejection:
    """Decide whether *error* is a parameter rejection we can work around."""
    param = getattr(error, "param", None)
    if isinstance(param, str) and param:
        if param in _TOKEN_NAMES:
            return Rejection.TOKEN_PARAM_REJECTED
        if param == "temperature" and params.temperature is not None:
            return Rejection.TEMPERATURE_REJECTED
        return Rejection.OTHER

    message = str(error)
    if any(name in message for name in _TOKEN_NAMES):
        return Rejection.TOKEN_PARAM_REJECTED
    if "temperature" in message and params.temperature is not None:
        return Rejection.TEMPERATURE_REJECTED
    return Rejection.OTHER


def adjust_for(rejection: Rejection, params: ResolvedParameters) -> ResolvedParameters | None:
    """Parameters for the fallback call, or ``None`` when there is none."""
    if rejection is Rejection.TOKEN_PARAM_REJECTED:
        return params.with_token_parameter(params.token_parameter.alternate)
    if rejection is Rejection.TEMPERATURE_REJECTED:
        return params.without_temperature()
    return None
