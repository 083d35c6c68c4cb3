import re
from typing import Iterable, List, Optional, Union

from app.core.errors import ValidationError

RawIds = Union[None, int, str, Iterable[Union[int, str]]]

# ASCII digits only; 19 digits covers every signed 64-bit value
_INTEGER = re.compile(r"[+-]?[0-9]{1,19}")

# Store identifiers are at most BIGINT
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def parse_ids(raw: RawIds) -> List[int]:
    """
    Turn raw request values into a list of integer identifiers.

    Accepts a single value or a sequence of values, each of which may be
    comma-joined text such as "1,2,3". Blank tokens are skipped, so an
    empty parameter means "no filter". Duplicates are dropped, keeping the
    first occurrence.

    Raises:
        ValidationError: a token is not an integer literal, or falls
            outside the signed 64-bit range.

    Example:
        parse_ids(["1,2", "2", " 7 "]) -> [1, 2, 7]
    """
    if raw is None:
        return []
    if isinstance(raw, (int, str)):
        raw = [raw]

    ids: List[int] = []
    for value in raw:
        # bool is an int subclass but never a valid identifier
        if isinstance(value, bool):
            raise ValidationError(value)
        if isinstance(value, int):
            tokens = [value]
        elif isinstance(value, str):
            tokens = [token.strip() for token in value.split(",")]
        else:
            raise ValidationError(value)

        for token in tokens:
            if isinstance(token, str):
                if not token:
                    continue
                if not _INTEGER.fullmatch(token):
                    raise ValidationError(token)
                token = int(token)
            if not MIN_ID <= token <= MAX_ID:
                raise ValidationError(token, f"Identifier out of range: {token}")
            ids.append(token)

    return list(dict.fromkeys(ids))


def parse_id(raw: Union[int, str]) -> Optional[int]:
    """Parse exactly one identifier; None when the value is blank."""
    ids = parse_ids(raw)
    if len(ids) > 1:
        raise ValidationError(raw, f"Expected a single identifier, got {raw!r}")
    return ids[0] if ids else None
