"""Inbound turn parsing — turns raw request data into validated entities."""

from __future__ import annotations

import pydantic

from drops_chat.l1_entities.errors import ValidationError
from drops_chat.l1_entities.message import InboundTurn


def parse_inbound_turn(data: object) -> InboundTurn:
    """Validate a decoded JSON body. Raises ValidationError on any shape problem."""
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    try:
        return InboundTurn.model_validate(data)
    except pydantic.ValidationError as e:
        problems = '; '.join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
        raise ValidationError(f'Invalid message: {problems}') from e
