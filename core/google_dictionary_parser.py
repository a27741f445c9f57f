#!/usr/bin/env python3
"""
Google Dictionary Panel Parser

Extracts a structured dictionary entry from the results page of a Google
``define <word>`` search. The panel has no semantic labels, so every field is
located through fixed selectors and fixed positions inside the result card:

    #center_col
      .lr_container                 first result card
        div[jsslot=""]  x5          header, search box, definitions,
                                    translations, usage-over-time graph

Only the third slot (index 2) carries the definitions. Inside it the first
child holds the headword pronunciation and every ``div[jsname="r5Nvmf"]`` is one
part-of-speech group.

The layout is undocumented and changes without notice. A miss anywhere never
raises: the affected field stays empty, and a missing headword is the single
"not found" signal handed to callers.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .dictionary_entry import DefinitionEntry, PartOfSpeechEntry, WordEntry

logger = logging.getLogger(__name__)

# Page layout selectors
RESULTS_REGION = "#center_col"
RESULT_CARD = ".lr_container"
SLOT_CHILDREN = ':scope > div[jsslot=""]'
HEADWORD = 'span[data-dobid="hdw"]'
AUDIO = "audio"
PHONETIC = "span.LTKOO"
POS_GROUP = 'div[jsname="r5Nvmf"]'
POS_LABEL = "span.YrbPuc"
DEFINITION_ITEMS = "ol > li"
GLOSS = '[data-dobid="dfn"]'
RELATED_LIST = 'div[role="list"]'

# Slot holding the definitions panel, zero based
DEFINITION_SLOT_INDEX = 2

# Inline style of the greyed-out input slots rendered inside synonym lists
PLACEHOLDER_STYLE = "cursor:text"

# Stray single-letter node the page renders inside synonym lists
STRAY_TOKEN = "h"


class RelationState(Enum):
    """Which output list the synonym/antonym classifier is filling"""
    SYNONYMS = "synonyms"
    ANTONYMS = "antonyms"


SECTION_LABELS = {
    "Similar:": RelationState.SYNONYMS,
    "Opposite:": RelationState.ANTONYMS,
}

# Entries shown before any section label are synonyms.
# TODO: confirm against a page that opens with "Opposite:" once one is captured.
INITIAL_RELATION_STATE = RelationState.SYNONYMS


# ---------------------------------------------------------------------------
# Small tree helpers


def select_nth(nodes: Sequence[Tag], index: int) -> Optional[Tag]:
    """Return the node at ``index`` in document order, or None when too few exist."""
    if index < 0 or index >= len(nodes):
        return None
    return nodes[index]


def _joined_text(nodes: Iterable[Tag]) -> str:
    return "".join(node.get_text() for node in nodes)


def _first_text(scope: Tag, selector: str) -> str:
    node = scope.select_one(selector)
    return node.get_text() if node is not None else ""


def _child_elements(node: Tag) -> List[Tag]:
    return node.find_all(True, recursive=False)


def _audio_source(scope: Tag) -> str:
    """``src`` of the first element nested directly in an <audio> tag"""
    for audio in scope.select(AUDIO):
        children = _child_elements(audio)
        if children:
            return children[0].get("src", "")
    return ""


def strip_example_quotes(text: str) -> str:
    """Remove one literal double quote from each end of an example sentence."""
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def _is_placeholder(node: Tag) -> bool:
    children = _child_elements(node)
    if not children:
        return False
    style = children[0].get("style", "")
    return "".join(style.split()).rstrip(";") == PLACEHOLDER_STYLE


# ---------------------------------------------------------------------------
# Synonym / antonym classification


def partition_related_words(items: Iterable[Tuple[str, bool]]) -> Tuple[List[str], List[str]]:
    """
    Split ``(text, is_placeholder)`` items into synonyms and antonyms.

    Section labels switch the target list and are never emitted themselves.
    Placeholders, empty strings and the stray ``h`` token are dropped whatever
    the current state.
    """
    synonyms: List[str] = []
    antonyms: List[str] = []
    outputs = {
        RelationState.SYNONYMS: synonyms,
        RelationState.ANTONYMS: antonyms,
    }

    state = INITIAL_RELATION_STATE
    for text, is_placeholder in items:
        if text in SECTION_LABELS:
            state = SECTION_LABELS[text]
            continue
        if is_placeholder or not text or text == STRAY_TOKEN:
            continue
        outputs[state].append(text)

    return synonyms, antonyms


def classify_related_words(scope: Tag) -> Tuple[List[str], List[str]]:
    """Run the classifier over the ``role="list"`` children found under ``scope``."""
    items = []
    for container in scope.select(RELATED_LIST):
        for child in _child_elements(container):
            items.append((child.get_text().strip(), _is_placeholder(child)))
    return partition_related_words(items)


# ---------------------------------------------------------------------------
# Panel extraction


def locate_definition_slot(document: Tag) -> Optional[Tag]:
    """Find the result-card slot that holds the definitions panel."""
    region = document.select_one(RESULTS_REGION)
    if region is None:
        logger.info("Results region %s not found on page", RESULTS_REGION)
        return None

    card = region.select_one(RESULT_CARD)
    if card is None:
        logger.info("No %s result card inside results region", RESULT_CARD)
        return None

    slots = card.select(SLOT_CHILDREN)
    slot = select_nth(slots, DEFINITION_SLOT_INDEX)
    if slot is None:
        logger.info(f"Result card has {len(slots)} slots, definitions panel missing")
    return slot


def extract_definition(node: Tag) -> Optional[DefinitionEntry]:
    """Build a definition from one list-item child, or None when it has no gloss."""
    glosses = node.select(GLOSS)
    text = _joined_text(glosses)
    if not text:
        return None

    sibling = glosses[0].find_next_sibling()
    example = strip_example_quotes(sibling.get_text()) if sibling is not None else ""
    synonyms, antonyms = classify_related_words(node)

    logger.debug(f"Definition: {text[:50]} ({len(synonyms)} synonyms, {len(antonyms)} antonyms)")
    return DefinitionEntry(text=text, example=example, synonyms=synonyms, antonyms=antonyms)


def extract_part_of_speech(group: Tag) -> PartOfSpeechEntry:
    entry = PartOfSpeechEntry(
        label=_first_text(group, POS_LABEL),
        phonetic=_first_text(group, PHONETIC),
        audio_url=_audio_source(group),
    )

    for item in group.select(DEFINITION_ITEMS):
        for child in _child_elements(item):
            definition = extract_definition(child)
            if definition is not None:
                entry.definitions.append(definition)

    return entry


def extract_word_entry(document: Tag) -> WordEntry:
    """
    Extract the dictionary entry from a parsed results page.

    Args:
        document: BeautifulSoup tree of the whole results page

    Returns:
        WordEntry; ``headword`` is empty when the page holds no definition panel
    """
    entry = WordEntry()

    slot = locate_definition_slot(document)
    if slot is None:
        return entry

    entry.headword = _joined_text(slot.select(HEADWORD))

    header = slot.find(True, recursive=False)
    if header is not None:
        entry.audio_url = _audio_source(header)
        entry.phonetic = _first_text(header, PHONETIC)

    groups = [group for child in _child_elements(slot) for group in child.select(POS_GROUP)]
    for group in groups:
        entry.parts_of_speech.append(extract_part_of_speech(group))

    logger.debug(f"Extracted '{entry.headword}' with {len(entry.parts_of_speech)} parts of speech")
    return entry


def parse_html(html: Union[str, bytes]) -> WordEntry:
    """Parse raw page HTML and extract its dictionary entry."""
    soup = BeautifulSoup(html, 'html.parser')
    return extract_word_entry(soup)
