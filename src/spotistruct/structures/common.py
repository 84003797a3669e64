"""
Small immutable value objects embedded in the structures.
"""
__all__ = ['Image', 'LinkedTrack', 'ResumePoint', 'Copyright', 'AudioFeatures', 'from_data',
           'from_data_list']

from typing import Any, Dict, List, Optional

import attr
from attr import attrs


def from_data(cls, data: Optional[Dict[str, Any]]):
    """ Builds an attrs value object from a JSON object ignoring unknown keys """
    if data is None:
        return None
    names = {field.name for field in attr.fields(cls)}
    return cls(**{key: value for key, value in data.items() if key in names})


def from_data_list(cls, items) -> List[Any]:
    return [from_data(cls, item) for item in items or ()]


@attrs(frozen=True, auto_attribs=True)
class Image:
    url: str
    height: Optional[int] = None
    width: Optional[int] = None


@attrs(frozen=True, auto_attribs=True)
class Copyright:
    text: str
    type: str


@attrs(frozen=True, auto_attribs=True)
class ResumePoint:
    fully_played: bool
    resume_position_ms: int


@attrs(frozen=True, auto_attribs=True)
class LinkedTrack:
    """ The originally requested track when track relinking replaced it """
    id: str
    uri: str
    type: str = 'track'
    href: Optional[str] = None
    external_urls: Dict[str, str] = attr.Factory(dict)


@attrs(frozen=True, auto_attribs=True)
class AudioFeatures:
    id: str
    acousticness: Optional[float] = None
    danceability: Optional[float] = None
    duration_ms: Optional[int] = None
    energy: Optional[float] = None
    instrumentalness: Optional[float] = None
    key: Optional[int] = None
    liveness: Optional[float] = None
    loudness: Optional[float] = None
    mode: Optional[int] = None
    speechiness: Optional[float] = None
    tempo: Optional[float] = None
    time_signature: Optional[int] = None
    valence: Optional[float] = None
    analysis_url: Optional[str] = None
    track_href: Optional[str] = None
    uri: Optional[str] = None
    type: str = 'audio_features'
