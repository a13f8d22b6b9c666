"""Starter French -> Mooré dictionary and corpus."""

import json
from pathlib import Path

from afropair.logging_config import get_logger

logger = get_logger(__name__)

SAMPLE_DICTIONARY = [
    ("je", "ànɛ", "PRON", 0.95),
    ("tu", "fɔɛ́", "PRON", 0.95),
    ("il", "à", "PRON", 0.90),
    ("elle", "à", "PRON", 0.90),
    ("nous", "tɩ̂", "PRON", 0.95),
    ("vous", "yɛ̂", "PRON", 0.95),
    ("ils", "bà", "PRON", 0.90),
    ("elles", "bà", "PRON", 0.90),
    ("aller", "zɩ̀", "VERB", 0.98),
    ("venir", "kɔɛ̂", "VERB", 0.95),
    ("être", "yã", "VERB", 0.98),
    ("avoir", "tɩ̂", "VERB", 0.95),
    ("faire", "kẽ", "VERB", 0.90),
    ("voir", "nyɛɛ̀", "VERB", 0.95),
    ("dire", "tɛɛ́", "VERB", 0.92),
    ("savoir", "sɔ̃b", "VERB", 0.88),
    ("marché", "zaabā", "NOUN", 0.97),
    ("maison", "yĩ̃", "NOUN", 0.98),
    ("eau", "kõom", "NOUN", 0.99),
    ("pain", "bɛɛ̀d", "NOUN", 0.95),
    ("riz", "rĩis", "NOUN", 0.96),
    ("viande", "nam", "NOUN", 0.94),
    ("au", "nà", "PREP", 0.85),
    ("du", "nà", "PREP", 0.80),
    ("de", "nà", "PREP", 0.82),
    ("le", "la", "DET", 0.75),
    ("la", "la", "DET", 0.75),
    ("les", "la", "DET", 0.70),
    ("un", "yɛɛ̀n", "DET", 0.80),
    ("une", "yɛɛ̀n", "DET", 0.80),
    ("bonjour", "nɛ bɛɛ̀dã", "INTJ", 0.95),
    ("merci", "bɛɛlg kɩ̀tā", "INTJ", 0.98),
    ("au revoir", "nɛ tɩ̂ sɔ́gẽ", "INTJ", 0.92),
    ("comment", "yɛ", "ADV", 0.90),
    ("où", "bonā", "ADV", 0.95),
    ("quand", "gõn yã", "ADV", 0.85),
    ("pourquoi", "sɛbkã", "ADV", 0.80),
    ("combien", "yɛɛ̀b", "ADV", 0.88),
    ("aujourd'hui", "tɩ̂ dãar", "ADV", 0.92),
    ("demain", "kɩsã", "ADV", 0.95),
    ("hier", "tɩneerã", "ADV", 0.90),
    ("beau", "kɩ̃", "ADJ", 0.85),
    ("grand", "gãnd", "ADJ", 0.88),
    ("petit", "bɩɩ̀g", "ADJ", 0.90),
    ("bon", "kɩ̃", "ADJ", 0.87),
    ("mauvais", "yùub", "ADJ", 0.82),
    ("chaud", "gũunã", "ADJ", 0.93),
    ("froid", "yùupĩ", "ADJ", 0.88),
]

SAMPLE_CORPUS = [
    ("Je vais au marché.", "N zɩ̀ nà zaabā."),
    ("Bonjour, comment allez-vous?", "Nɛ bɛɛ̀dã, yɛ fɔ yã?"),
    ("J'aime manger du riz.", "N zɔg rĩis dĩim."),
    ("Il fait chaud aujourd'hui.", "Tɩ̂ dãar la gũunã."),
    ("Où est la maison?", "Yĩ̃ la bonā?"),
    ("Elle est très belle.", "À kɩ̃ sɩ́ndã."),
    ("Merci beaucoup.", "Bɛɛlg kɩ̀tā sɩ́ndã."),
    ("Au revoir!", "Nɛ tɩ̂ sɔ́gẽ!"),
    ("Je ne comprends pas.", "N kà sɔ̃b."),
    ("Combien ça coûte?", "A tɩ̂ yɛɛ̀b?"),
]

SAMPLE_SENTENCES = [
    "Je vais au marché.",
    "Bonjour, comment allez-vous?",
    "J'aime manger du riz.",
    "Il fait chaud aujourd'hui.",
    "Où est la maison?",
    "Elle est très belle.",
    "Nous partons demain.",
    "Combien ça coûte?",
    "Je ne comprends pas.",
    "Merci beaucoup.",
]


def write_sample_data(
    dictionary_path: Path, corpus_path: Path, overwrite: bool = False
) -> list[Path]:
    """Write the starter tables, returning the files actually written."""
    written: list[Path] = []

    if overwrite or not dictionary_path.exists():
        dictionary_path.parent.mkdir(parents=True, exist_ok=True)
        lines = ["fr_word\tmos_word\tpos\tscore"]
        lines.extend(f"{src}\t{tgt}\t{pos}\t{score:.2f}" for src, tgt, pos, score in SAMPLE_DICTIONARY)
        dictionary_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        written.append(dictionary_path)
        logger.info("Created sample dictionary", path=str(dictionary_path))

    if overwrite or not corpus_path.exists():
        corpus_path.parent.mkdir(parents=True, exist_ok=True)
        records = [
            json.dumps({"source": src, "target": tgt, "provenance": "manual_v1"}, ensure_ascii=False)
            for src, tgt in SAMPLE_CORPUS
        ]
        corpus_path.write_text("\n".join(records) + "\n", encoding="utf-8")
        written.append(corpus_path)
        logger.info("Created sample corpus", path=str(corpus_path))

    return written
