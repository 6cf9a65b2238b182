"""Alignment of reference words to recognized words."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from ..models.aligned_word import AlignedWord
from .edit_distance import align_sequences

if TYPE_CHECKING:
    from ..models.utterance import RecognizedUtterance, ReferenceUtterance

logger = logging.getLogger(__name__)


def align_positional(
    reference: "ReferenceUtterance", recognized: "RecognizedUtterance"
) -> List[AlignedWord]:
    """Pair reference and recognized words by index.

    Pair i is (reference.words[i], recognized.words[i]), or an empty
    recognized word when the transcript is shorter. Extra recognized words
    are ignored. A single inserted or dropped word therefore shifts every
    later pair.

    Args:
        reference: The expected utterance
        recognized: The ASR output

    Returns:
        One AlignedWord per reference word, in reference order
    """
    aligned: List[AlignedWord] = []
    for i, ref_word in enumerate(reference.words):
        if i < len(recognized.words):
            hyp_word = recognized.words[i]
            aligned.append(
                AlignedWord(
                    ref_word=ref_word,
                    hyp_word=hyp_word,
                    position=i,
                    confidence=recognized.word_confidence[i],
                    op="match" if hyp_word == ref_word else "sub",
                    hyp_index=i,
                )
            )
        else:
            aligned.append(AlignedWord(ref_word=ref_word, hyp_word="", position=i, confidence=0.0, op="del"))
    return aligned


def align_by_edit_distance(
    reference: "ReferenceUtterance", recognized: "RecognizedUtterance"
) -> List[AlignedWord]:
    """Pair words along a word-level edit-distance path.

    Recovers from inserted and dropped words: deletions pair the reference
    word with "" and insertions are skipped, so the result still has
    exactly one entry per reference word.
    """
    ops = align_sequences(reference.words, recognized.words)
    aligned: List[AlignedWord] = []
    for op, ri, hj in ops:
        if ri is None:
            continue  # "ins": extra recognized word, no reference slot
        if hj is None:
            aligned.append(
                AlignedWord(ref_word=reference.words[ri], hyp_word="", position=ri, confidence=0.0, op="del")
            )
        else:
            aligned.append(
                AlignedWord(
                    ref_word=reference.words[ri],
                    hyp_word=recognized.words[hj],
                    position=ri,
                    confidence=recognized.word_confidence[hj],
                    op=op,
                    hyp_index=hj,
                )
            )
    return aligned


def align_words(
    reference: "ReferenceUtterance",
    recognized: "RecognizedUtterance",
    mode: str = "positional",
) -> List[AlignedWord]:
    """Align with the requested strategy ("positional" or "sequence")."""
    if mode == "sequence":
        aligned = align_by_edit_distance(reference, recognized)
    elif mode == "positional":
        aligned = align_positional(reference, recognized)
    else:
        raise ValueError(f"Unknown alignment mode: {mode!r}")

    logger.debug(
        "Aligned %d reference words to %d recognized words (%s)",
        len(reference.words), len(recognized.words), mode,
    )
    return aligned
