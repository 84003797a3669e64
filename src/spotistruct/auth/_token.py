import json
import os
import time
from typing import Any, Dict, Optional, Tuple, Union

import attr
from attr import attrib, attrs

from spotistruct.utils import normalize_scope

TokenType = Union[Dict, 'OAuth2Token']


@attrs(frozen=True, auto_attribs=True, repr=False)
class OAuth2Token:
    access_token: str
    expires_in: int
    scope: Tuple[str, ...] = attrib(converter=normalize_scope)    # type: ignore
    state: Optional[str] = None
    token_type: str = 'Bearer'
    expires_at: Optional[float] = None
    refresh_token: Optional[str] = None

    def __attrs_post_init__(self):
        if self.expires_at is None:
            object.__setattr__(self, 'expires_at', time.time() + self.expires_in - 2)

    @staticmethod
    def from_dict(data: Dict[str, Any], ignore_unknown_keys=False) -> 'OAuth2Token':
        if ignore_unknown_keys:
            valid_keys = {field.name for field in attr.fields(OAuth2Token)}
            data = {key: value for key, value in data.items() if key in valid_keys}
        return OAuth2Token(**data)

    @staticmethod
    def from_json(path) -> 'OAuth2Token':
        with open(path) as fin:
            return OAuth2Token.from_dict(json.load(fin))

    def to_dict(self) -> Dict[str, Any]:
        return attr.asdict(self)

    def to_json(self, path):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, 'w') as fout:
            json.dump(self.to_dict(), fout, indent=2)

    def is_expired(self, margin=2) -> bool:
        return time.time() >= (self.expires_at - margin)

    def __repr__(self) -> str:
        # never print the secret parts of the token
        return '{}(token_type={!r}, scope={!r}, expires_at={!r})'.format(
            self.__class__.__name__, self.token_type, self.scope, self.expires_at)
