#!/usr/bin/env python3
"""
Dictionary entry records produced by the Google dictionary parser.

Every record is built fresh for a single extraction pass. Lists are only ever
appended to while the pass runs, and ``to_dict`` produces the JSON shape served
by the web API.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class DefinitionEntry:
    """One gloss with its usage example and related words"""
    text: str
    example: str = ""
    synonyms: List[str] = field(default_factory=list)
    antonyms: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'definition': self.text,
            'example': self.example,
            'synonyms': list(self.synonyms),
            'antonyms': list(self.antonyms),
        }


@dataclass
class PartOfSpeechEntry:
    """A grammatical group of definitions, with its own pronunciation"""
    label: str = ""
    phonetic: str = ""
    audio_url: str = ""
    definitions: List[DefinitionEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'parts_of_speech': self.label,
            'phonetic': self.phonetic,
            'audio': self.audio_url,
            'definitions': [definition.to_dict() for definition in self.definitions],
        }


@dataclass
class WordEntry:
    """Complete extraction result; an empty headword means nothing was found"""
    headword: str = ""
    audio_url: str = ""
    phonetic: str = ""
    parts_of_speech: List[PartOfSpeechEntry] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.headword != ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.headword,
            'audio': self.audio_url,
            'phonetic': self.phonetic,
            'parts_of_speeches': [pos.to_dict() for pos in self.parts_of_speech],
        }
