# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in list of commonly misspelled English words."""

from __future__ import annotations

from typing import Final

PICKY: Final[str] = "picky"
IMPORTANT: Final[str] = "important"

# Partial rules match inside longer words, so entries are stems that never
# occur inside a correctly spelled word.
PARTIAL_WORD_RULES: Final[dict[str, dict[str, str]]] = {
    IMPORTANT: {
        "acheiv": "achiev",
        "accomodat": "accommodat",
        "arguement": "argument",
        "begining": "beginning",
        "comming": "coming",
        "commited": "committed",
        "definately": "definitely",
        "enviroment": "environment",
        "existance": "existence",
        "heigth": "height",
        "lenght": "length",
        "neccessar": "necessar",
        "occurence": "occurrence",
        "occured": "occurred",
        "paramter": "parameter",
        "recieve": "receive",
        "retreiv": "retriev",
        "seperat": "separat",
        "succesful": "successful",
        "supress": "suppress",
        "untill": "until",
        "widht": "width",
        "wierd": "weird",
    },
    PICKY: {
        "adress": "address",
        "calulat": "calculat",
    },
}

WHOLE_WORD_RULES: Final[dict[str, dict[str, str]]] = {
    IMPORTANT: {
        "alot": "a lot",
        "hte": "the",
        "taht": "that",
        "teh": "the",
        "thier": "their",
        "wich": "which",
    },
    PICKY: {
        "adn": "and",
        "nto": "not",
        "wether": "whether",
    },
}

__all__ = ["IMPORTANT", "PARTIAL_WORD_RULES", "PICKY", "WHOLE_WORD_RULES"]
