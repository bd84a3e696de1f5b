"""Drop discovered hotels that are already curated or repeat earlier finds."""

import logging

from thefuzz import fuzz

from models.candidate import HotelCandidate

logger = logging.getLogger(__name__)

NAME_SIMILARITY_THRESHOLD = 85


class CandidateDeduplicator:
    def __init__(self, known_names: list[str] | None = None):
        """Seed with the names of hotels already in the curated dataset."""
        self._known: list[str] = [n.lower() for n in known_names or []]

    def deduplicate(self, candidates: list[HotelCandidate]) -> list[HotelCandidate]:
        """Return only candidates whose names are not fuzzy matches of known ones.

        Accepted candidates join the known set, so repeats within the batch
        are dropped too.
        """
        new_candidates: list[HotelCandidate] = []

        for candidate in candidates:
            if self.is_known(candidate.name):
                continue
            self._known.append(candidate.name.lower())
            new_candidates.append(candidate)

        logger.info(
            f"Dedup: {len(candidates)} candidates -> {len(new_candidates)} new hotels"
        )
        return new_candidates

    def is_known(self, name: str) -> bool:
        lowered = name.lower()
        return any(
            fuzz.token_sort_ratio(lowered, known) > NAME_SIMILARITY_THRESHOLD
            for known in self._known
        )
